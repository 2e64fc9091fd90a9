"""
Validate Access Token Use Case

Public check of a token string, with usage telemetry on success.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.access_token_repository import UsageRecordingError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import isoformat_utc, utcnow
from src.domain.entities import TOKEN_LENGTH

from .dtos import TokenValidationResponse

logger = logging.getLogger(__name__)

REASON_BAD_LENGTH = f"Token must be exactly {TOKEN_LENGTH} characters"
REASON_NOT_FOUND = "Token not found"
REASON_WRONG_EVENT = "Token does not belong to this event"
REASON_REVOKED = "Token has been revoked"
REASON_EXPIRED = "Token expired"


class ValidateTokenUseCase:
    """
    Use case for validating an access token.

    Business Rules (checked in order, first failure wins):
    1. Token must be exactly 21 characters (no lookup otherwise)
    2. Token must exist
    3. If event_id is given, the token must belong to that event
    4. Token must not be revoked (revoked_at returned)
    5. Token must not be expired
    Successful validation increments use_count and advances last_used_at.
    The usage write is telemetry: its failure never invalidates the token.
    An invalid token is an expected outcome, so it is an Ok result.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, token: str, event_id: Optional[UUID] = None
    ) -> Result[TokenValidationResponse]:
        """
        Execute validate token use case.

        Args:
            token: Candidate token string
            event_id: Optional event the token must belong to

        Returns:
            Result with TokenValidationResponse DTO
        """
        if len(token) != TOKEN_LENGTH:
            return Return.ok(TokenValidationResponse(valid=False, reason=REASON_BAD_LENGTH))

        async with self.uow:
            access_token = await self.uow.access_tokens.get_by_token(token)

            if access_token is None:
                return Return.ok(TokenValidationResponse(valid=False, reason=REASON_NOT_FOUND))

            if event_id is not None and access_token.event_id != event_id:
                return Return.ok(
                    TokenValidationResponse(valid=False, reason=REASON_WRONG_EVENT)
                )

            if access_token.revoked_at is not None:
                return Return.ok(
                    TokenValidationResponse(
                        valid=False,
                        reason=REASON_REVOKED,
                        revoked_at=isoformat_utc(access_token.revoked_at),
                    )
                )

            now = self.clock()
            if access_token.expires_at <= now:
                return Return.ok(TokenValidationResponse(valid=False, reason=REASON_EXPIRED))

            # Built before the usage write: a rollback expires loaded rows
            response = TokenValidationResponse(
                valid=True,
                token_id=str(access_token.id),
                event_id=str(access_token.event_id),
                token_type=access_token.token_type.value,
                expires_at=isoformat_utc(access_token.expires_at),
            )

            try:
                await self.uow.access_tokens.record_usage(access_token.id, now)
                await self.uow.commit()
            except UsageRecordingError:
                logger.warning(
                    "Failed to record usage for token %s", response.token_id, exc_info=True
                )
                await self.uow.rollback()

            return Return.ok(response)
