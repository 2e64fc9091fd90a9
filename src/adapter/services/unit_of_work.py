from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_token_repository import AccessTokenRepository
from src.adapter.repositories.admin_repository import AdminRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.event_repository import EventRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.admins = AdminRepository(self.session)
        self.events = EventRepository(self.session)
        self.access_tokens = AccessTokenRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed explicitly is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
