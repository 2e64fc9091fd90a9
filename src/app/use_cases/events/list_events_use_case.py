"""
List Events Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin

from .dtos import EventResponse, ListEventsResponse


class ListEventsUseCase:
    """Lists the tenant's events, newest first. Admins only."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, admin_id: UUID, tenant_id: UUID) -> Result[ListEventsResponse]:
        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            events = await self.uow.events.list_by_tenant(tenant_id)
            responses = [EventResponse.from_entity(e) for e in events]

            return Return.ok(ListEventsResponse(events=responses, total=len(responses)))
