from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.tokens import ListTokensUseCase
from src.domain.entities import TokenStatus, TokenType


@pytest.fixture
def event_tokens(private_event, make_token, now):
    return [
        make_token(private_event, token_type=TokenType.organizer),
        make_token(private_event),
        make_token(private_event, revoked_at=now - timedelta(hours=1)),
        make_token(private_event, expires_at=now - timedelta(hours=1)),
    ]


@pytest.mark.asyncio
async def test_list_tokens_with_counts(authorized_uow, clock, admin, tenant, private_event, event_tokens):
    authorized_uow.events.get_by_id.return_value = private_event
    authorized_uow.access_tokens.list_by_event.return_value = event_tokens

    result = await ListTokensUseCase(authorized_uow, clock).execute(admin.id, tenant.id, private_event.id)

    assert result.is_ok()
    response = result.value
    assert response.total == 4
    assert response.active_count == 2
    assert response.revoked_count == 1
    assert response.expired_count == 1
    assert [t.status for t in response.tokens] == ["active", "active", "revoked", "expired"]
    assert [t.is_active for t in response.tokens] == [True, True, False, False]
    authorized_uow.access_tokens.list_by_event.assert_called_once_with(tenant.id, private_event.id)


@pytest.mark.asyncio
async def test_status_filter_keeps_counts_over_all_tokens(
    authorized_uow, clock, admin, tenant, private_event, event_tokens
):
    authorized_uow.events.get_by_id.return_value = private_event
    authorized_uow.access_tokens.list_by_event.return_value = event_tokens

    result = await ListTokensUseCase(authorized_uow, clock).execute(
        admin.id, tenant.id, private_event.id, status=TokenStatus.revoked
    )

    response = result.value
    assert response.total == 1
    assert response.tokens[0].status == "revoked"
    assert response.active_count == 2
    assert response.expired_count == 1


@pytest.mark.asyncio
async def test_list_tokens_unknown_event(authorized_uow, clock, admin, tenant):
    authorized_uow.events.get_by_id.return_value = None

    result = await ListTokensUseCase(authorized_uow, clock).execute(admin.id, tenant.id, uuid4())

    assert result.is_err()
    assert result.error.code == "EVENT_NOT_FOUND"
    authorized_uow.access_tokens.list_by_event.assert_not_called()
