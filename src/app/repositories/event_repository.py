from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Event


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID, event_id: UUID) -> Optional[Event]:
        """Get event by ID within a tenant"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Event]:
        """Get event by public slug (not tenant-scoped)"""
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: UUID) -> List[Event]:
        """Get all events of a tenant, newest first"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass
