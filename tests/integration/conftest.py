from datetime import timedelta

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.domain.clock import utcnow
from src.domain.entities import Admin, Tenant


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _create_tenant_admin(db_session: AsyncSession, name: str, email: str) -> dict:
    tenant = Tenant(name=name)
    db_session.add(tenant)
    await db_session.flush()
    admin = Admin(tenant_id=tenant.id, email=email)
    db_session.add(admin)
    await db_session.commit()
    return {
        "tenant_id": tenant.id,
        "admin_id": admin.id,
        "headers": {"Authorization": f"Bearer {generate_jwt(admin.id, tenant.id)}"},
    }


@pytest_asyncio.fixture
async def tenant_admin(db_session):
    """Active admin of an active tenant, with ready-made auth headers"""
    return await _create_tenant_admin(db_session, "Acme Events", "admin@acme.com")


@pytest_asyncio.fixture
async def other_tenant_admin(db_session):
    return await _create_tenant_admin(db_session, "Globex Events", "admin@globex.com")


@pytest_asyncio.fixture
async def private_event(client, tenant_admin):
    """Private event created through the API, with its two initial tokens"""
    response = await client.post(
        "/events",
        json={
            "name": "Summer Gala",
            "slug": "summer-gala",
            "event_date": "2026-07-01",
            "visibility": "private",
            "token_expiration_date": (utcnow() + timedelta(days=30)).isoformat() + "Z",
        },
        headers=tenant_admin["headers"],
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def public_event(client, tenant_admin):
    response = await client.post(
        "/events",
        json={
            "name": "Open Day",
            "slug": "open-day",
            "event_date": "2026-07-01",
            "visibility": "public",
        },
        headers=tenant_admin["headers"],
    )
    assert response.status_code == 201
    return response.json()
