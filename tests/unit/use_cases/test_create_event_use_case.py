from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from src.app.use_cases.events import CreateEventUseCase, ListEventsUseCase
from src.domain.entities import Event, EventVisibility

FRONTEND_URL = "http://localhost:3000"


@pytest.fixture
def generator():
    generator = MagicMock()
    generator.generate.side_effect = ["o" * 21, "p" * 21]
    return generator


def build_use_case(uow, generator, clock):
    return CreateEventUseCase(uow, generator, FRONTEND_URL, max_attempts=5, clock=clock)


@pytest.mark.asyncio
async def test_create_private_event_issues_two_tokens(authorized_uow, generator, clock, now, admin, tenant):
    authorized_uow.events.get_by_slug.return_value = None
    expiry = now + timedelta(days=30)

    result = await build_use_case(authorized_uow, generator, clock).execute(
        admin.id,
        tenant.id,
        name="Summer Gala",
        slug="summer-gala",
        event_date=date(2026, 7, 1),
        visibility=EventVisibility.private,
        token_expiration_date=expiry,
    )

    assert result.is_ok()
    response = result.value
    assert response.event.slug == "summer-gala"
    assert response.event.visibility == "private"
    assert response.event.event_date == "2026-07-01"
    assert [t.token_type for t in response.tokens] == ["organizer", "participant"]
    assert all(t.expires_at == expiry.isoformat() + "Z" for t in response.tokens)
    assert response.tokens[1].url == f"{FRONTEND_URL}/events/summer-gala?token={'p' * 21}"

    created_event = authorized_uow.events.create.call_args[0][0]
    assert isinstance(created_event, Event)
    assert created_event.tenant_id == tenant.id
    assert authorized_uow.access_tokens.create.call_count == 2
    actions = [c[0][0].action for c in authorized_uow.audit_events.create.call_args_list]
    assert actions == ["event_created", "token_issued", "token_issued"]
    authorized_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_public_event_has_no_tokens(authorized_uow, generator, clock, admin, tenant):
    authorized_uow.events.get_by_slug.return_value = None

    result = await build_use_case(authorized_uow, generator, clock).execute(
        admin.id,
        tenant.id,
        name="Open Day",
        slug="open-day",
        event_date=date(2026, 7, 1),
        visibility=EventVisibility.public,
    )

    assert result.is_ok()
    assert result.value.tokens == []
    authorized_uow.access_tokens.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("slug", ["ab", "Summer-Gala", "summer_gala", "-gala", "gala-", "a" * 101])
async def test_invalid_slug(authorized_uow, generator, clock, admin, tenant, slug):
    result = await build_use_case(authorized_uow, generator, clock).execute(
        admin.id, tenant.id, name="Gala", slug=slug, event_date=date(2026, 7, 1),
        visibility=EventVisibility.public,
    )

    assert result.is_err()
    assert result.error.code == "INVALID_SLUG"


@pytest.mark.asyncio
async def test_slug_taken(authorized_uow, generator, clock, admin, tenant, public_event):
    authorized_uow.events.get_by_slug.return_value = public_event

    result = await build_use_case(authorized_uow, generator, clock).execute(
        admin.id, tenant.id, name="Open Day", slug="open-day", event_date=date(2026, 7, 1),
        visibility=EventVisibility.public,
    )

    assert result.is_err()
    assert result.error.code == "SLUG_TAKEN"
    authorized_uow.events.create.assert_not_called()


@pytest.mark.asyncio
async def test_private_event_requires_future_token_expiration(authorized_uow, generator, clock, now, admin, tenant):
    use_case = build_use_case(authorized_uow, generator, clock)

    missing = await use_case.execute(
        admin.id, tenant.id, name="Gala", slug="gala", event_date=date(2026, 7, 1),
        visibility=EventVisibility.private,
    )
    past = await use_case.execute(
        admin.id, tenant.id, name="Gala", slug="gala", event_date=date(2026, 7, 1),
        visibility=EventVisibility.private, token_expiration_date=now - timedelta(days=1),
    )

    assert missing.error.code == "INVALID_TOKEN_EXPIRATION"
    assert past.error.code == "INVALID_TOKEN_EXPIRATION"
    authorized_uow.events.create.assert_not_called()


@pytest.mark.asyncio
async def test_public_event_rejects_token_expiration(authorized_uow, generator, clock, now, admin, tenant):
    result = await build_use_case(authorized_uow, generator, clock).execute(
        admin.id, tenant.id, name="Open Day", slug="open-day", event_date=date(2026, 7, 1),
        visibility=EventVisibility.public, token_expiration_date=now + timedelta(days=1),
    )

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN_EXPIRATION"


@pytest.mark.asyncio
async def test_list_events(authorized_uow, admin, tenant, private_event, public_event):
    authorized_uow.events.list_by_tenant.return_value = [public_event, private_event]

    result = await ListEventsUseCase(authorized_uow).execute(admin.id, tenant.id)

    assert result.is_ok()
    assert result.value.total == 2
    assert [e.slug for e in result.value.events] == ["open-day", "summer-gala"]
    authorized_uow.events.list_by_tenant.assert_called_once_with(tenant.id)
