from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.repositories.access_token_repository import UsageRecordingError
from src.app.use_cases.tokens import ValidateTokenUseCase
from src.domain.entities import TokenType

TOKEN = "abcDEF123_-xyz7890abc"


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["", "short", "a" * 20, "a" * 22])
async def test_wrong_length_is_rejected_without_lookup(mock_uow, clock, token):
    use_case = ValidateTokenUseCase(mock_uow, clock)
    result = await use_case.execute(token)

    assert result.is_ok()
    assert result.value.valid is False
    assert result.value.reason == "Token must be exactly 21 characters"
    mock_uow.__aenter__.assert_not_called()
    mock_uow.access_tokens.get_by_token.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow, clock):
    mock_uow.access_tokens.get_by_token.return_value = None

    result = await ValidateTokenUseCase(mock_uow, clock).execute("z" * 21)

    assert result.value.valid is False
    assert result.value.reason == "Token not found"
    mock_uow.access_tokens.record_usage.assert_not_called()


@pytest.mark.asyncio
async def test_valid_token_records_usage(mock_uow, clock, now, private_event, make_token):
    access_token = make_token(private_event, token=TOKEN)
    mock_uow.access_tokens.get_by_token.return_value = access_token

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN, private_event.id)

    assert result.is_ok()
    response = result.value
    assert response.valid is True
    assert response.token_id == str(access_token.id)
    assert response.event_id == str(private_event.id)
    assert response.token_type == "participant"
    assert response.expires_at == access_token.expires_at.isoformat() + "Z"
    assert response.reason is None
    mock_uow.access_tokens.record_usage.assert_called_once_with(access_token.id, now)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_token_of_other_event(mock_uow, clock, private_event, make_token):
    mock_uow.access_tokens.get_by_token.return_value = make_token(private_event, token=TOKEN)

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN, uuid4())

    assert result.value.valid is False
    assert result.value.reason == "Token does not belong to this event"
    mock_uow.access_tokens.record_usage.assert_not_called()


@pytest.mark.asyncio
async def test_revoked_token_reports_revoked_at(mock_uow, clock, now, private_event, make_token):
    revoked_at = now - timedelta(hours=1)
    mock_uow.access_tokens.get_by_token.return_value = make_token(
        private_event, token=TOKEN, revoked_at=revoked_at
    )

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN)

    assert result.value.valid is False
    assert result.value.reason == "Token has been revoked"
    assert result.value.revoked_at == revoked_at.isoformat() + "Z"
    mock_uow.access_tokens.record_usage.assert_not_called()


@pytest.mark.asyncio
async def test_event_mismatch_checked_before_revocation(mock_uow, clock, now, private_event, make_token):
    mock_uow.access_tokens.get_by_token.return_value = make_token(
        private_event, token=TOKEN, revoked_at=now
    )

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN, uuid4())

    assert result.value.reason == "Token does not belong to this event"


@pytest.mark.asyncio
async def test_revocation_checked_before_expiry(mock_uow, clock, now, private_event, make_token):
    mock_uow.access_tokens.get_by_token.return_value = make_token(
        private_event, token=TOKEN, revoked_at=now, expires_at=now - timedelta(days=1)
    )

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN)

    assert result.value.reason == "Token has been revoked"


@pytest.mark.asyncio
async def test_expired_token(mock_uow, clock, now, private_event, make_token):
    mock_uow.access_tokens.get_by_token.return_value = make_token(
        private_event, token=TOKEN, expires_at=now
    )

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN)

    assert result.value.valid is False
    assert result.value.reason == "Token expired"
    mock_uow.access_tokens.record_usage.assert_not_called()


@pytest.mark.asyncio
async def test_expiry_is_monotonic_across_clock(mock_uow, now, private_event, make_token):
    """Valid before expires_at, invalid at and after it"""
    mock_uow.access_tokens.get_by_token.return_value = make_token(
        private_event, token=TOKEN, token_type=TokenType.organizer, expires_at=now
    )

    before = await ValidateTokenUseCase(mock_uow, lambda: now - timedelta(seconds=1)).execute(TOKEN)
    at = await ValidateTokenUseCase(mock_uow, lambda: now).execute(TOKEN)
    after = await ValidateTokenUseCase(mock_uow, lambda: now + timedelta(days=1)).execute(TOKEN)

    assert before.value.valid is True
    assert at.value.valid is False
    assert after.value.valid is False


@pytest.mark.asyncio
async def test_usage_write_failure_does_not_invalidate(mock_uow, clock, private_event, make_token):
    access_token = make_token(private_event, token=TOKEN)
    mock_uow.access_tokens.get_by_token.return_value = access_token
    mock_uow.access_tokens.record_usage.side_effect = UsageRecordingError("database is locked")

    result = await ValidateTokenUseCase(mock_uow, clock).execute(TOKEN)

    assert result.is_ok()
    assert result.value.valid is True
    assert result.value.token_id == str(access_token.id)
    mock_uow.rollback.assert_called_once()
