"""
Get Audit Events Use Case

Retrieves token and event audit trail for a tenant with pagination.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.domain.clock import isoformat_utc


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a tenant.

    Business Rules:
    - Caller must be an active admin of the tenant
    - Results are tenant-scoped (only events for the tenant)
    - Results ordered by newest first
    - Supports cursor-based pagination
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        admin_id: UUID,
        tenant_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Args:
            admin_id: Admin UUID from JWT
            tenant_id: Tenant UUID from JWT
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            events, next_cursor = await self.uow.audit_events.get_by_tenant_paginated(
                tenant_id, limit=limit, cursor=cursor
            )

            events_list = [
                {
                    "action": event.action,
                    "user_id": str(event.user_id) if event.user_id else None,
                    "timestamp": isoformat_utc(event.created_at),
                    "metadata": event.event_metadata or {},
                }
                for event in events
            ]

            return Return.ok({"events": events_list, "next_cursor": next_cursor})
