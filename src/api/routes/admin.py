"""
Admin API Routes - System Administration Endpoints

These endpoints are for internal service integrations (provisioning,
billing system). Authentication is via Admin API Key, not admin JWTs.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    ProvisionTenantResponse,
    ProvisionTenantUseCase,
    RestoreTenantResponse,
    RestoreTenantUseCase,
    SuspendTenantResponse,
    SuspendTenantUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class ProvisionTenantRequest(BaseModel):
    """POST /admin/tenants request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Agency name")
    admin_email: EmailStr = Field(..., description="Email of the first administrator")


@router.post(
    "/tenants",
    status_code=status.HTTP_201_CREATED,
    response_model=ProvisionTenantResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def provision_tenant(
    request: ProvisionTenantRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Provision Tenant

    Creates a tenant and its first administrator. The returned admin_id is
    the `user_id` claim the identity provider puts in the admin's JWTs.

    Requires: X-Admin-API-Key header
    """
    use_case = ProvisionTenantUseCase(uow)
    result = await use_case.execute(request.name, request.admin_email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/tenants/{tenant_id}/suspend",
    status_code=status.HTTP_200_OK,
    response_model=SuspendTenantResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def suspend_tenant(
    tenant_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Suspend Tenant

    Billing system endpoint to suspend a tenant for non-payment.
    Blocks all admin operations of the tenant.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: TENANT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = SuspendTenantUseCase(uow)
    result = await use_case.execute(tenant_id)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/tenants/{tenant_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=RestoreTenantResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def restore_tenant(
    tenant_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Restore Tenant

    Billing system endpoint to restore a suspended tenant after payment.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: TENANT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = RestoreTenantUseCase(uow)
    result = await use_case.execute(tenant_id)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
