from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.security import hash_password, hash_token, verify_password
from src.app.use_cases.auth.request_password_reset_use_case import RequestPasswordResetUseCase
from src.app.use_cases.auth.reset_password_use_case import ResetPasswordUseCase
from src.domain.entities import AuthToken, TokenPurpose, User, UserStatus
from src.domain.errors import TokenExpiredError, TokenNotFoundError, WeakCredentialError


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        email="user@acme.com",
        name="User",
        password_hash=hash_password("OldPass123!"),
    )


@pytest.fixture
def reset_token(user, now):
    return AuthToken(
        id=uuid4(),
        user_id=user.id,
        token_hash=hash_token("reset-value"),
        purpose=TokenPurpose.password_reset,
        issued_at=now - timedelta(minutes=10),
        expires_at=now + timedelta(minutes=50),
    )


@pytest.mark.asyncio
async def test_request_password_reset(mock_uow, notifier, clock, now, user):
    mock_uow.users.get_by_email.return_value = user

    result = await RequestPasswordResetUseCase(mock_uow, notifier, clock=clock).execute(
        "User@Acme.com"
    )

    assert result.status == "sent"
    mock_uow.users.get_by_email.assert_called_once_with("user@acme.com")
    mock_uow.auth_tokens.revoke_live_by_user_id.assert_called_once_with(
        user.id, now, purpose=TokenPurpose.password_reset
    )
    created = mock_uow.auth_tokens.create.call_args.args[0]
    assert created.expires_at == now + timedelta(hours=1)
    mock_uow.audit_events.create.assert_called_once()
    mock_uow.commit.assert_called_once()

    _, _, body = notifier.sent[0]
    assert "/reset-password/" in body


@pytest.mark.asyncio
async def test_request_password_reset_no_enumeration(mock_uow, notifier, clock, user):
    use_case = RequestPasswordResetUseCase(mock_uow, notifier, clock=clock)

    mock_uow.users.get_by_email.return_value = None
    unknown = await use_case.execute("ghost@acme.com")

    user.status = UserStatus.deactivated
    mock_uow.users.get_by_email.return_value = user
    deactivated = await use_case.execute("user@acme.com")

    assert unknown == deactivated
    assert unknown.status == "sent"
    mock_uow.auth_tokens.create.assert_not_called()
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_request_password_reset_hides_delivery_failure(mock_uow, notifier, clock, user):
    notifier.fail = True
    mock_uow.users.get_by_email.return_value = user

    result = await RequestPasswordResetUseCase(mock_uow, notifier, clock=clock).execute(
        "user@acme.com"
    )

    assert result.status == "sent"


@pytest.mark.asyncio
async def test_reset_password(mock_uow, clock, now, user, reset_token):
    mock_uow.auth_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user
    mock_uow.auth_tokens.revoke_live_by_user_id.return_value = 2

    result = await ResetPasswordUseCase(mock_uow, clock=clock).execute("reset-value", "NewPass456!")

    assert result.status == "success"
    assert verify_password("NewPass456!", user.password_hash)
    assert not verify_password("OldPass123!", user.password_hash)
    mock_uow.auth_tokens.consume.assert_called_once_with(reset_token.id, now)
    mock_uow.auth_tokens.revoke_live_by_user_id.assert_called_once_with(
        user.id, now, purpose=TokenPurpose.session
    )
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.event_metadata["sessions_revoked"] == 2
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_reset_password_weak(mock_uow, clock):
    with pytest.raises(WeakCredentialError):
        await ResetPasswordUseCase(mock_uow, clock=clock).execute("reset-value", "short")

    mock_uow.auth_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_reset_password_token_already_used(mock_uow, clock, now, user, reset_token):
    reset_token.consumed_at = now - timedelta(minutes=1)
    mock_uow.auth_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user

    with pytest.raises(TokenNotFoundError):
        await ResetPasswordUseCase(mock_uow, clock=clock).execute("reset-value", "NewPass456!")

    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_reset_password_token_expired(mock_uow, user, reset_token):
    mock_uow.auth_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user
    later = reset_token.expires_at + timedelta(minutes=1)

    with pytest.raises(TokenExpiredError):
        await ResetPasswordUseCase(mock_uow, clock=lambda: later).execute(
            "reset-value", "NewPass456!"
        )


@pytest.mark.asyncio
async def test_reset_password_token_consumed_concurrently(mock_uow, clock, user, reset_token):
    # Token looked live when read, but another request consumed it first
    mock_uow.auth_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user
    mock_uow.auth_tokens.consume.return_value = False
    old_hash = user.password_hash

    with pytest.raises(TokenNotFoundError):
        await ResetPasswordUseCase(mock_uow, clock=clock).execute("reset-value", "NewPass456!")

    assert user.password_hash == old_hash
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()
