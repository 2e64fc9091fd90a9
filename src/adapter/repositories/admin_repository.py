from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_repository import IAdminRepository
from src.domain.entities import Admin


class AdminRepository(IAdminRepository):
    """Admin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id_and_tenant(
        self, admin_id: UUID, tenant_id: UUID
    ) -> Optional[Admin]:
        """Get admin by ID, only if it belongs to the tenant"""
        stmt = select(Admin).where(Admin.id == admin_id, Admin.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, admin: Admin) -> Admin:
        """Create a new admin"""
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin
