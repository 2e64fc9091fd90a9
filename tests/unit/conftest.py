from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import (
    AccessToken,
    Admin,
    Event,
    EventVisibility,
    Tenant,
    TenantStatus,
    TokenType,
)

NOW = datetime(2026, 6, 1, 12, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.tenants = MagicMock()
    uow.tenants.get_by_id = AsyncMock()
    uow.tenants.create = AsyncMock()
    uow.tenants.update = AsyncMock()

    uow.admins = MagicMock()
    uow.admins.get_by_id_and_tenant = AsyncMock()
    uow.admins.create = AsyncMock()

    uow.events = MagicMock()
    uow.events.get_by_id = AsyncMock()
    uow.events.get_by_slug = AsyncMock()
    uow.events.list_by_tenant = AsyncMock(return_value=[])
    uow.events.create = AsyncMock()

    uow.access_tokens = MagicMock()
    uow.access_tokens.get_by_id = AsyncMock()
    uow.access_tokens.get_by_token = AsyncMock()
    uow.access_tokens.exists_by_token = AsyncMock(return_value=False)
    uow.access_tokens.list_by_event = AsyncMock(return_value=[])
    uow.access_tokens.create = AsyncMock()
    uow.access_tokens.record_usage = AsyncMock()
    uow.access_tokens.revoke_if_active = AsyncMock(return_value=True)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()
    uow.audit_events.get_by_tenant_paginated = AsyncMock(return_value=([], None))

    return uow


@pytest.fixture
def tenant():
    return Tenant(id=uuid4(), name="Acme Events", status=TenantStatus.active)


@pytest.fixture
def admin(tenant):
    return Admin(id=uuid4(), tenant_id=tenant.id, email="admin@acme.com")


@pytest.fixture
def private_event(tenant, admin):
    return Event(
        id=uuid4(),
        tenant_id=tenant.id,
        slug="summer-gala",
        name="Summer Gala",
        event_date=NOW.date(),
        visibility=EventVisibility.private,
        token_expiration_date=NOW + timedelta(days=30),
        created_by=admin.id,
    )


@pytest.fixture
def public_event(tenant, admin):
    return Event(
        id=uuid4(),
        tenant_id=tenant.id,
        slug="open-day",
        name="Open Day",
        event_date=NOW.date(),
        visibility=EventVisibility.public,
        created_by=admin.id,
    )


@pytest.fixture
def authorized_uow(mock_uow, tenant, admin):
    """mock_uow where the caller is an active admin of an active tenant"""
    mock_uow.admins.get_by_id_and_tenant.return_value = admin
    mock_uow.tenants.get_by_id.return_value = tenant
    return mock_uow


@pytest.fixture
def make_token():
    """Factory for AccessToken rows of an event, active at NOW by default"""

    def _make(event, token_type=TokenType.participant, **overrides) -> AccessToken:
        values = dict(
            id=uuid4(),
            tenant_id=event.tenant_id,
            event_id=event.id,
            token="A" * 21,
            token_type=token_type,
            expires_at=NOW + timedelta(days=1),
            created_at=NOW - timedelta(days=1),
        )
        values.update(overrides)
        return AccessToken(**values)

    return _make
