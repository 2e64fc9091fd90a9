"""
List Access Tokens Use Case

Lists an event's tokens with derived status and aggregate counts.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.domain.clock import utcnow
from src.domain.entities import TokenStatus

from .dtos import AccessTokenResponse, ListTokensResponse


class ListTokensUseCase:
    """
    Use case for listing the access tokens of an event.

    Business Rules:
    - Only active admins of the owning tenant can list tokens
    - Status is derived at read time (active / revoked / expired)
    - Optional status filter applies to the list only; counts cover all tokens
    - Tokens ordered newest first
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        admin_id: UUID,
        tenant_id: UUID,
        event_id: UUID,
        status: Optional[TokenStatus] = None,
    ) -> Result[ListTokensResponse]:
        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            event = await self.uow.events.get_by_id(tenant_id, event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            access_tokens = await self.uow.access_tokens.list_by_event(tenant_id, event_id)

            now = self.clock()
            responses = [AccessTokenResponse.from_entity(t, now) for t in access_tokens]

            counts = {s: 0 for s in TokenStatus}
            for response in responses:
                counts[TokenStatus(response.status)] += 1

            if status is not None:
                responses = [r for r in responses if r.status == status.value]

            return Return.ok(
                ListTokensResponse(
                    tokens=responses,
                    total=len(responses),
                    active_count=counts[TokenStatus.active],
                    revoked_count=counts[TokenStatus.revoked],
                    expired_count=counts[TokenStatus.expired],
                )
            )
