"""
Event Entity

An agency event; private events are gated by access tokens.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, Date, DateTime, Field, Index, SQLModel

from src.domain.clock import utcnow

from .enums import EventVisibility


class Event(SQLModel, table=True):
    """
    Event entity.

    Business Rules:
    - slug is globally unique and used in public URLs
    - Private events carry token_expiration_date, public events do not
    - Access tokens can only be issued for private events
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    slug: str = Field(max_length=100, unique=True, index=True)
    name: str = Field(max_length=255)
    event_date: date = Field(sa_column=Column(Date, nullable=False))
    description: Optional[str] = Field(default=None, max_length=2000)

    visibility: EventVisibility = Field(default=EventVisibility.public)
    token_expiration_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_by: Optional[UUID] = Field(default=None)
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_event_tenant_created", "tenant_id", "created_at"),)

    @property
    def is_private(self) -> bool:
        return self.visibility == EventVisibility.private
