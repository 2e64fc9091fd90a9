"""
Admin Entity

Tenant administrator allowed to manage events and access tokens.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.clock import utcnow

from .enums import AdminStatus

if TYPE_CHECKING:
    from .tenant import Tenant


class Admin(SQLModel, table=True):
    """
    Admin entity - administrator of a single tenant.

    Business Rules:
    - (tenant_id, email) must be unique
    - Disabled admins cannot act on tenant resources
    - Authentication happens upstream; the JWT "user_id" claim is the admin id
    """

    __tablename__ = "admins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False)

    status: AdminStatus = Field(default=AdminStatus.active)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    # Relationships
    tenant: "Tenant" = Relationship(back_populates="admins")

    __table_args__ = (
        Index("idx_admin_tenant_email", "tenant_id", "email", unique=True),
    )
