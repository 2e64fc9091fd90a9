"""
Issue Access Token Use Case

Handles issuing organizer/participant tokens for private events.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.domain.access_url import build_access_url
from src.domain.clock import as_utc_naive, utcnow
from src.domain.entities import TokenType

from .dtos import AccessTokenResponse, IssueTokenResponse
from .token_issuance import generate_unique_token, persist_access_token

logger = logging.getLogger(__name__)


class IssueTokenUseCase:
    """
    Use case for issuing an access token for a private event.

    Business Rules:
    - Only active admins of the owning tenant can issue tokens
    - expires_at must be strictly in the future
    - Tokens can only be generated for private events
    - Token string is 21 URL-safe characters from a CSPRNG, regenerated on collision
    - New tokens start with use_count=0 and no usage/revocation data
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
        event_id: UUID,
        token_type: TokenType,
        expires_at: datetime,
    ) -> Result[IssueTokenResponse]:
        """
        Execute issue token use case.

        Args:
            admin_id: Admin ID from JWT
            tenant_id: Tenant ID from JWT
            event_id: Event to scope the token to
            token_type: organizer or participant
            expires_at: Expiration timestamp (aware or naive UTC)

        Returns:
            Result with IssueTokenResponse DTO, or Error
        """
        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            now = self.clock()
            expires_at = as_utc_naive(expires_at)
            if expires_at <= now:
                return Return.err(
                    Error("INVALID_EXPIRATION", "Expiration date must be in the future")
                )

            event = await self.uow.events.get_by_id(tenant_id, event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            if not event.is_private:
                return Return.err(
                    Error(
                        "EVENT_NOT_PRIVATE",
                        "Tokens can only be generated for private events",
                    )
                )

            token = await generate_unique_token(
                self.uow, self.token_generator, self.max_attempts
            )
            if token is None:
                return Return.err(
                    Error("TOKEN_GENERATION_FAILED", "Could not generate a unique token")
                )

            access_token = await persist_access_token(
                self.uow, event, token, token_type, expires_at, issued_by=admin_id
            )

            await self.uow.commit()

            logger.info(
                "Issued %s token %s for event %s", token_type.value, access_token.id, event.id
            )

            return Return.ok(
                IssueTokenResponse(
                    **AccessTokenResponse.from_entity(access_token, now).model_dump(),
                    url=build_access_url(self.frontend_url, event.slug, access_token.token),
                )
            )
