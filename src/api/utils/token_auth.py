"""
Event Access Token Extraction

Visitors of private events present their access token either as a
`token` query parameter (deep links) or as `Authorization: Bearer <token>`.
"""

from typing import Optional

from fastapi import Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.public import AccessPublicEventUseCase, PublicEventResponse
from src.depends import get_unit_of_work
from src.domain.entities import TokenType

optional_bearer = HTTPBearer(auto_error=False)


async def get_access_token(
    token: Optional[str] = Query(None, description="Event access token"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer),
) -> Optional[str]:
    """Query parameter wins over the Authorization header."""
    if token:
        return token
    if credentials:
        return credentials.credentials
    return None


def raise_for_access_error(error: Error):
    if error.code == "EVENT_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == "TOKEN_REQUIRED":
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    if error.code == "INVALID_TOKEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    raise ServerError(error)


async def get_event_access(
    slug: str,
    token: Optional[str] = Depends(get_access_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> PublicEventResponse:
    """Resolve the event by slug and check the presented token."""
    result = await AccessPublicEventUseCase(uow).execute(slug, token)
    if result.is_err():
        raise_for_access_error(result.error)
    return result.value


async def require_organizer(
    access: PublicEventResponse = Depends(get_event_access),
) -> PublicEventResponse:
    """Organizer-only actions reject participant tokens and anonymous access."""
    if access.access.token_type != TokenType.organizer.value:
        raise ClientError(
            Error("ORGANIZER_REQUIRED", "This action requires organizer access"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return access
