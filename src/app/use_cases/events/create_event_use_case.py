"""
Create Event Use Case

Handles event creation; private events get their initial tokens.
"""

import logging
import re
from datetime import date, datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.app.use_cases.tokens.dtos import AccessTokenResponse, IssueTokenResponse
from src.app.use_cases.tokens.token_issuance import (
    generate_unique_token,
    persist_access_token,
)
from src.domain.access_url import build_access_url
from src.domain.clock import as_utc_naive, utcnow
from src.domain.entities import AuditEvent, Event, EventVisibility, TokenType

from .dtos import CreateEventResponse, EventResponse

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CreateEventUseCase:
    """
    Use case for creating an event.

    Business Rules:
    - Only active admins of the tenant can create events
    - Slug: lowercase alphanumeric with hyphens, 3-100 chars, globally unique
    - Private events require a future token_expiration_date; public events
      must not have one
    - Private events get one organizer and one participant token, both
      expiring at token_expiration_date, in the same transaction
    - Creates an event_created audit event
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: ITokenGenerator,
        frontend_url: str,
        max_attempts: int = 5,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.frontend_url = frontend_url
        self.max_attempts = max_attempts
        self.clock = clock

    async def execute(
        self,
        admin_id: UUID,
        tenant_id: UUID,
        name: str,
        slug: str,
        event_date: date,
        visibility: EventVisibility,
        description: Optional[str] = None,
        token_expiration_date: Optional[datetime] = None,
    ) -> Result[CreateEventResponse]:
        """
        Execute create event use case.

        Returns:
            Result with CreateEventResponse DTO, or Error
        """
        if not (3 <= len(slug) <= 100) or not SLUG_PATTERN.match(slug):
            return Return.err(
                Error(
                    "INVALID_SLUG",
                    "Slug must be 3-100 lowercase alphanumeric characters with hyphens",
                )
            )

        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            now = self.clock()
            if visibility == EventVisibility.private:
                if token_expiration_date is None:
                    return Return.err(
                        Error(
                            "INVALID_TOKEN_EXPIRATION",
                            "Private events require a token expiration date",
                        )
                    )
                token_expiration_date = as_utc_naive(token_expiration_date)
                if token_expiration_date <= now:
                    return Return.err(
                        Error(
                            "INVALID_TOKEN_EXPIRATION",
                            "Expiration date must be in the future",
                        )
                    )
            elif token_expiration_date is not None:
                return Return.err(
                    Error(
                        "INVALID_TOKEN_EXPIRATION",
                        "Public events cannot have a token expiration date",
                    )
                )

            if await self.uow.events.get_by_slug(slug) is not None:
                return Return.err(Error("SLUG_TAKEN", "An event with this slug already exists"))

            event = Event(
                tenant_id=tenant_id,
                slug=slug,
                name=name,
                event_date=event_date,
                description=description,
                visibility=visibility,
                token_expiration_date=token_expiration_date,
                created_by=admin_id,
            )
            await self.uow.events.create(event)

            audit = AuditEvent(
                tenant_id=tenant_id,
                user_id=admin_id,
                action="event_created",
                event_metadata={
                    "event_id": str(event.id),
                    "slug": slug,
                    "visibility": visibility.value,
                },
            )
            await self.uow.audit_events.create(audit)

            tokens = []
            if event.is_private:
                for token_type in (TokenType.organizer, TokenType.participant):
                    token = await generate_unique_token(
                        self.uow, self.token_generator, self.max_attempts
                    )
                    if token is None:
                        return Return.err(
                            Error(
                                "TOKEN_GENERATION_FAILED",
                                "Could not generate a unique token",
                            )
                        )
                    access_token = await persist_access_token(
                        self.uow,
                        event,
                        token,
                        token_type,
                        token_expiration_date,
                        issued_by=admin_id,
                    )
                    tokens.append(
                        IssueTokenResponse(
                            **AccessTokenResponse.from_entity(access_token, now).model_dump(),
                            url=build_access_url(self.frontend_url, event.slug, token),
                        )
                    )

            event_response = EventResponse.from_entity(event)

            await self.uow.commit()

            logger.info("Created %s event %s", visibility.value, event.id)

            return Return.ok(CreateEventResponse(event=event_response, tokens=tokens))
