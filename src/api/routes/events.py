"""
Event API Routes

Tenant admins create and list their events.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.events import (
    CreateEventResponse,
    CreateEventUseCase,
    ListEventsResponse,
    ListEventsUseCase,
)
from src.domain.entities import EventVisibility
from src.depends import get_current_user, get_token_generator, get_unit_of_work

router = APIRouter(prefix="/events", tags=["Events"])


class CreateEventRequest(BaseModel):
    """POST /events request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., description="Lowercase alphanumeric with hyphens, 3-100 chars")
    event_date: date
    visibility: EventVisibility = EventVisibility.private
    description: Optional[str] = None
    token_expiration_date: Optional[datetime] = Field(
        None, description="Required for private events; expiry of the initial tokens"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateEventResponse)
async def create_event(
    request: CreateEventRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_generator: ITokenGenerator = Depends(get_token_generator),
):
    """
    Create Event

    Private events are created with one organizer and one participant token.

    Raises:
        - 403 Forbidden: Not a tenant admin or tenant suspended
        - 409 Conflict: Slug already taken
        - 422 Unprocessable Entity: Invalid slug or token expiration date
    """
    use_case = CreateEventUseCase(
        uow,
        token_generator,
        ApplicationConfig.FRONTEND_URL,
        max_attempts=ApplicationConfig.TOKEN_GENERATION_MAX_ATTEMPTS,
    )
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
        name=request.name,
        slug=request.slug,
        event_date=request.event_date,
        visibility=request.visibility,
        description=request.description,
        token_expiration_date=request.token_expiration_date,
    )

    if result.is_err():
        error = result.error
        if error.code in ("NOT_TENANT_ADMIN", "TENANT_SUSPENDED"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        if error.code == "SLUG_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        if error.code == "INVALID_SLUG":
            raise ClientError(
                error,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                details=[{"field": "slug", "message": error.message}],
            )
        if error.code == "INVALID_TOKEN_EXPIRATION":
            raise ClientError(
                error,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                details=[{"field": "token_expiration_date", "message": error.message}],
            )
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ListEventsResponse)
async def list_events(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the tenant's events, newest first."""
    use_case = ListEventsUseCase(uow)
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
    )

    if result.is_err():
        error = result.error
        if error.code in ("NOT_TENANT_ADMIN", "TENANT_SUSPENDED"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
