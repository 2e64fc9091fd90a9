"""
Use Case: Restore Tenant

Billing integration endpoint to restore a suspended tenant after payment.
"""

from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TenantStatus


class RestoreTenantResponse(BaseModel):
    """Response DTO for RestoreTenantUseCase"""

    status: str


class RestoreTenantUseCase:
    """
    Restore a suspended tenant; its admins can manage events again.

    Idempotent: restoring an active tenant succeeds without side effects.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[RestoreTenantResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            if tenant.status != TenantStatus.active:
                tenant.status = TenantStatus.active
                await self.uow.tenants.update(tenant)

                audit_event = AuditEvent(
                    tenant_id=tenant_id,
                    user_id=None,
                    action="tenant_restored",
                    event_metadata={},
                )
                await self.uow.audit_events.create(audit_event)

                await self.uow.commit()

            return Return.ok(RestoreTenantResponse(status=TenantStatus.active.value))
