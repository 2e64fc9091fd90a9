"""
Public Event Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Event


class PublicEventInfo(BaseModel):
    """Event fields safe to show to anonymous visitors"""

    id: str
    slug: str
    name: str
    event_date: str
    description: Optional[str] = None
    visibility: str

    @classmethod
    def from_entity(cls, event: Event) -> "PublicEventInfo":
        return cls(
            id=str(event.id),
            slug=event.slug,
            name=event.name,
            event_date=event.event_date.isoformat(),
            description=event.description,
            visibility=event.visibility.value,
        )


class EventAccess(BaseModel):
    """What the presented token allows"""

    token_id: Optional[str] = None
    token_type: Optional[str] = None
    can_upload: bool


class PublicEventResponse(BaseModel):
    event: PublicEventInfo
    access: EventAccess


class EventAccessSummaryResponse(BaseModel):
    """Token counts of an event, visible to organizers"""

    event_id: str
    total: int
    active_count: int
    revoked_count: int
    expired_count: int
