"""
Tenant Entity

An agency account; the unit of data isolation.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.clock import utcnow

from .enums import TenantStatus

if TYPE_CHECKING:
    from .admin import Admin


class Tenant(SQLModel, table=True):
    """
    Tenant entity - isolated workspace for an agency.

    Business Rules:
    - Every event, token and admin belongs to exactly one tenant
    - Suspension blocks all admin operations
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    status: TenantStatus = Field(default=TenantStatus.active)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    # Relationships
    admins: list["Admin"] = Relationship(back_populates="tenant")

    __table_args__ = (Index("idx_tenant_status", "status"),)
