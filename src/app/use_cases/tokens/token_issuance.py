"""
Token issuance shared by the issue token and create event use cases.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccessToken, AuditEvent, Event, TokenType

logger = logging.getLogger(__name__)


async def generate_unique_token(
    uow: UnitOfWork, token_generator: ITokenGenerator, max_attempts: int
) -> Optional[str]:
    """
    Generate a token string not yet present in the store.

    Returns:
        The token, or None if every attempt collided
    """
    for attempt in range(1, max_attempts + 1):
        candidate = token_generator.generate()
        if not await uow.access_tokens.exists_by_token(candidate):
            return candidate
        logger.warning("Access token collision on attempt %d, regenerating", attempt)
    return None


async def persist_access_token(
    uow: UnitOfWork,
    event: Event,
    token: str,
    token_type: TokenType,
    expires_at: datetime,
    issued_by: UUID,
) -> AccessToken:
    """Insert a fresh token row and its token_issued audit event"""
    access_token = AccessToken(
        tenant_id=event.tenant_id,
        event_id=event.id,
        token=token,
        token_type=token_type,
        expires_at=expires_at,
    )
    await uow.access_tokens.create(access_token)

    audit = AuditEvent(
        tenant_id=event.tenant_id,
        user_id=issued_by,
        action="token_issued",
        event_metadata={
            "event_id": str(event.id),
            "token_id": str(access_token.id),
            "token_type": token_type.value,
        },
    )
    await uow.audit_events.create(audit)

    return access_token
