from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Admin


class IAdminRepository(ABC):
    """Admin repository interface - application layer"""

    @abstractmethod
    async def get_by_id_and_tenant(
        self, admin_id: UUID, tenant_id: UUID
    ) -> Optional[Admin]:
        """Get admin by ID, only if it belongs to the tenant"""
        pass

    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        """Create a new admin"""
        pass
