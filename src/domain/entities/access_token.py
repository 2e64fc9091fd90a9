"""
AccessToken Entity

Opaque bearer credential scoping access to one private event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.clock import utcnow

from .enums import TokenStatus, TokenType

TOKEN_LENGTH = 21
TOKEN_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"
)


class AccessToken(SQLModel, table=True):
    """
    AccessToken entity - gates read (participant) or read/write (organizer)
    access to a private event.

    Business Rules:
    - token is 21 URL-safe characters, unique, immutable
    - tenant_id, event_id, token_type, created_at are immutable
    - revoked_at is set once and never cleared (revoked_by set with it)
    - use_count only grows, by exactly 1 per successful validation
    - Never deleted by the application; removed only with its event
    """

    __tablename__ = "access_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)

    token: str = Field(unique=True, index=True, max_length=TOKEN_LENGTH)
    token_type: TokenType = Field(nullable=False)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Revocation
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    revoked_by: Optional[UUID] = Field(default=None)

    # Usage telemetry
    last_used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    use_count: int = Field(default=0, nullable=False)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_access_token_tenant_event", "tenant_id", "event_id"),
        Index("idx_access_token_expires_at", "expires_at"),
    )

    def status_at(self, now: datetime) -> TokenStatus:
        """Derived status: revoked wins over expired"""
        if self.revoked_at is not None:
            return TokenStatus.revoked
        if self.expires_at <= now:
            return TokenStatus.expired
        return TokenStatus.active

    def is_active_at(self, now: datetime) -> bool:
        return self.status_at(now) == TokenStatus.active
