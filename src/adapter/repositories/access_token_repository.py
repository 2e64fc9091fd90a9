from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import case, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.access_token_repository import (
    IAccessTokenRepository,
    UsageRecordingError,
)
from src.domain.entities import AccessToken


class AccessTokenRepository(IAccessTokenRepository):
    """AccessToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self, tenant_id: UUID, token_id: UUID
    ) -> Optional[AccessToken]:
        """Get token by ID within a tenant (always re-read from the database)"""
        stmt = (
            select(AccessToken)
            .where(AccessToken.id == token_id, AccessToken.tenant_id == tenant_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[AccessToken]:
        """Get token by exact token string"""
        stmt = (
            select(AccessToken)
            .where(AccessToken.token == token)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_token(self, token: str) -> bool:
        """Check whether a token string is already taken"""
        stmt = select(AccessToken.id).where(AccessToken.token == token)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def list_by_event(
        self, tenant_id: UUID, event_id: UUID
    ) -> List[AccessToken]:
        """Get all tokens of an event within a tenant, newest first"""
        stmt = (
            select(AccessToken)
            .where(
                AccessToken.tenant_id == tenant_id,
                AccessToken.event_id == event_id,
            )
            .order_by(AccessToken.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, access_token: AccessToken) -> AccessToken:
        """Create a new access token"""
        self.session.add(access_token)
        await self.session.flush()
        await self.session.refresh(access_token)
        return access_token

    async def record_usage(self, token_id: UUID, used_at: datetime) -> None:
        """Increment use_count in SQL; last_used_at keeps the later timestamp"""
        stmt = (
            update(AccessToken)
            .where(AccessToken.id == token_id)
            .values(
                use_count=AccessToken.use_count + 1,
                last_used_at=case(
                    (
                        or_(
                            AccessToken.last_used_at.is_(None),
                            AccessToken.last_used_at < used_at,
                        ),
                        used_at,
                    ),
                    else_=AccessToken.last_used_at,
                ),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise UsageRecordingError(f"Could not record usage for token {token_id}") from exc

    async def revoke_if_active(
        self, tenant_id: UUID, token_id: UUID, revoked_at: datetime, revoked_by: UUID
    ) -> bool:
        """Conditional update: only the first revocation lands"""
        stmt = (
            update(AccessToken)
            .where(
                AccessToken.id == token_id,
                AccessToken.tenant_id == tenant_id,
                AccessToken.revoked_at.is_(None),
            )
            .values(revoked_at=revoked_at, revoked_by=revoked_by)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
