"""
Use Case: Provision Tenant

Internal endpoint creating an agency tenant and its first administrator.
"""

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Admin, AuditEvent, Tenant


class ProvisionTenantResponse(BaseModel):
    """Response DTO for ProvisionTenantUseCase"""

    tenant_id: str
    admin_id: str


class ProvisionTenantUseCase:
    """
    Create a tenant together with its first admin.

    Business Logic:
    1. Create tenant (active)
    2. Create admin bound to the tenant
    3. Create audit event
    The admin authenticates through the upstream identity provider, whose
    JWTs carry the returned admin_id as "user_id".
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str, admin_email: str) -> Result[ProvisionTenantResponse]:
        async with self.uow:
            tenant = Tenant(name=name)
            await self.uow.tenants.create(tenant)

            admin = Admin(tenant_id=tenant.id, email=admin_email.lower())
            await self.uow.admins.create(admin)

            audit_event = AuditEvent(
                tenant_id=tenant.id,
                user_id=None,  # System action, no specific admin
                action="tenant_provisioned",
                event_metadata={"admin_id": str(admin.id), "admin_email": admin.email},
            )
            await self.uow.audit_events.create(audit_event)

            response = ProvisionTenantResponse(
                tenant_id=str(tenant.id), admin_id=str(admin.id)
            )

            await self.uow.commit()

            return Return.ok(response)
