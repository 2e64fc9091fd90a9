from abc import ABC, abstractmethod

from src.app.repositories.access_token_repository import IAccessTokenRepository
from src.app.repositories.admin_repository import IAdminRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.event_repository import IEventRepository
from src.app.repositories.tenant_repository import ITenantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    admins: IAdminRepository
    events: IEventRepository
    access_tokens: IAccessTokenRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
