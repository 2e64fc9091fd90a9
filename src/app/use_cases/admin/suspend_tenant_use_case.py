"""
Use Case: Suspend Tenant

Billing integration endpoint to suspend a tenant for non-payment.
Blocks all admin operations; issued tokens keep their own lifecycle.
"""

from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TenantStatus


class SuspendTenantResponse(BaseModel):
    """Response DTO for SuspendTenantUseCase"""

    status: str


class SuspendTenantUseCase:
    """
    Suspend a tenant (billing integration).

    Idempotent: suspending an already-suspended tenant succeeds without
    writing another audit event.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[SuspendTenantResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            if tenant.status != TenantStatus.suspended:
                tenant.status = TenantStatus.suspended
                await self.uow.tenants.update(tenant)

                audit_event = AuditEvent(
                    tenant_id=tenant_id,
                    user_id=None,
                    action="tenant_suspended",
                    event_metadata={},
                )
                await self.uow.audit_events.create(audit_event)

                await self.uow.commit()

            return Return.ok(SuspendTenantResponse(status=TenantStatus.suspended.value))
