"""
Tenant administrator checks shared by admin-facing use cases.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminStatus, TenantStatus


async def check_tenant_admin(
    uow: UnitOfWork, admin_id: UUID, tenant_id: UUID
) -> Optional[Error]:
    """
    Verify the actor is an active admin of an active tenant.

    Must be called inside an open unit of work.

    Returns:
        None if authorized, otherwise the Error to return
    """
    admin = await uow.admins.get_by_id_and_tenant(admin_id, tenant_id)
    if admin is None or admin.status != AdminStatus.active:
        return Error("NOT_TENANT_ADMIN", "You are not an administrator of this tenant")

    tenant = await uow.tenants.get_by_id(tenant_id)
    if tenant is None:
        return Error("NOT_TENANT_ADMIN", "You are not an administrator of this tenant")

    if tenant.status == TenantStatus.suspended:
        return Error("TENANT_SUSPENDED", "Tenant has been suspended")

    return None
