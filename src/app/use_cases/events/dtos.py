"""
Event Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.tokens.dtos import IssueTokenResponse
from src.domain.clock import isoformat_utc
from src.domain.entities import Event


class EventResponse(BaseModel):
    """Event as seen by tenant admins"""

    id: str
    slug: str
    name: str
    event_date: str
    description: Optional[str] = None
    visibility: str
    token_expiration_date: Optional[str] = None
    created_at: str

    @classmethod
    def from_entity(cls, event: Event) -> "EventResponse":
        return cls(
            id=str(event.id),
            slug=event.slug,
            name=event.name,
            event_date=event.event_date.isoformat(),
            description=event.description,
            visibility=event.visibility.value,
            token_expiration_date=isoformat_utc(event.token_expiration_date),
            created_at=isoformat_utc(event.created_at),
        )


class CreateEventResponse(BaseModel):
    """Created event and the tokens issued with it (private events only)"""

    event: EventResponse
    tokens: List[IssueTokenResponse]


class ListEventsResponse(BaseModel):
    events: List[EventResponse]
    total: int
