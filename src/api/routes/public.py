"""
Public Event API Routes

Token-gated views of an event for visitors holding a deep link.
"""

from fastapi import APIRouter, Depends, status

from src.api.utils.token_auth import get_event_access, raise_for_access_error, require_organizer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.public import (
    EventAccessSummaryResponse,
    GetEventAccessSummaryUseCase,
    PublicEventResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/public/events", tags=["Public"])

@router.get("/{slug}", status_code=status.HTTP_200_OK, response_model=PublicEventResponse)
async def get_public_event(access: PublicEventResponse = Depends(get_event_access)):
    """
    Open Event Page

    Public events are open to anyone. Private events require an access token
    valid for the event (query parameter `token` or Bearer header).

    Raises:
        - 401 Unauthorized: Private event without a token
        - 403 Forbidden: Token invalid for this event (reason in message)
        - 404 Not Found: Unknown slug
    """
    return access

@router.get(
    "/{slug}/access-summary",
    status_code=status.HTTP_200_OK,
    response_model=EventAccessSummaryResponse,
)
async def get_access_summary(
    slug: str,
    access: PublicEventResponse = Depends(require_organizer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Token counts of the event, for organizers."""
    result = await GetEventAccessSummaryUseCase(uow).execute(slug)

    if result.is_err():
        raise_for_access_error(result.error)

    return result.value
