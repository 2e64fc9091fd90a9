"""
Get Event Access Summary Use Case

Token counts for an event, shown to organizers on the event page.
"""

from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow
from src.domain.entities import TokenStatus

from .dtos import EventAccessSummaryResponse


class GetEventAccessSummaryUseCase:
    """
    Counts an event's tokens by derived status.

    The caller (API layer) must already have checked for an organizer token
    of this event.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, slug: str) -> Result[EventAccessSummaryResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_slug(slug)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            # Scoped to the event's own tenant
            access_tokens = await self.uow.access_tokens.list_by_event(
                event.tenant_id, event.id
            )

            now = self.clock()
            counts = {s: 0 for s in TokenStatus}
            for access_token in access_tokens:
                counts[access_token.status_at(now)] += 1

            return Return.ok(
                EventAccessSummaryResponse(
                    event_id=str(event.id),
                    total=len(access_tokens),
                    active_count=counts[TokenStatus.active],
                    revoked_count=counts[TokenStatus.revoked],
                    expired_count=counts[TokenStatus.expired],
                )
            )
