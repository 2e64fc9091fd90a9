"""
Lookup shared by the token artifact use cases (deep link, QR code).
"""

from datetime import datetime
from typing import Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccessToken, Event, TokenStatus

INACTIVE_TOKEN_MESSAGE = "Token is no longer active"


async def load_shareable_token(
    uow: UnitOfWork, tenant_id: UUID, event_id: UUID, token_id: UUID, now: datetime
) -> Result[Tuple[Event, AccessToken]]:
    """
    Load an event's token for sharing.

    Artifacts are only produced for active tokens: a revoked token yields
    TOKEN_REVOKED and an expired one TOKEN_EXPIRED.

    Must be called inside an open unit of work.
    """
    event = await uow.events.get_by_id(tenant_id, event_id)
    if event is None:
        return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

    access_token = await uow.access_tokens.get_by_id(tenant_id, token_id)
    if access_token is None or access_token.event_id != event_id:
        return Return.err(Error("TOKEN_NOT_FOUND", "Token not found"))

    status = access_token.status_at(now)
    if status == TokenStatus.revoked:
        return Return.err(Error("TOKEN_REVOKED", INACTIVE_TOKEN_MESSAGE))
    if status == TokenStatus.expired:
        return Return.err(Error("TOKEN_EXPIRED", INACTIVE_TOKEN_MESSAGE))

    return Return.ok((event, access_token))
