"""
Access Public Event Use Case

Resolves an event by slug and checks the visitor's access token.
"""

from datetime import datetime
from typing import Callable, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tokens.validate_token_use_case import ValidateTokenUseCase
from src.domain.clock import utcnow
from src.domain.entities import TokenType

from .dtos import EventAccess, PublicEventInfo, PublicEventResponse


class AccessPublicEventUseCase:
    """
    Use case for opening an event page.

    Business Rules:
    - Public events need no token
    - Private events require a token valid for that event
    - A valid token counts as a use (telemetry)
    - Only organizer tokens can upload
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, slug: str, token: Optional[str] = None
    ) -> Result[PublicEventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_slug(slug)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            event_info = PublicEventInfo.from_entity(event)
            event_id = event.id
            is_private = event.is_private

        if not is_private:
            return Return.ok(
                PublicEventResponse(event=event_info, access=EventAccess(can_upload=False))
            )

        if not token:
            return Return.err(Error("TOKEN_REQUIRED", "No access token provided"))

        validation = (
            await ValidateTokenUseCase(self.uow, self.clock).execute(token, event_id)
        ).value
        if not validation.valid:
            return Return.err(Error("INVALID_TOKEN", validation.reason))

        return Return.ok(
            PublicEventResponse(
                event=event_info,
                access=EventAccess(
                    token_id=validation.token_id,
                    token_type=validation.token_type,
                    can_upload=validation.token_type == TokenType.organizer.value,
                ),
            )
        )
