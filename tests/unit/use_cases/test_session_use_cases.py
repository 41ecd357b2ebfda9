from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.security import hash_token
from src.app.use_cases.auth.logout_use_case import LogoutUseCase
from src.app.use_cases.auth.validate_token_use_case import ValidateTokenUseCase
from src.domain.entities import AuthToken, TokenPurpose, User
from src.domain.errors import TokenExpiredError, TokenNotFoundError


@pytest.fixture
def user():
    return User(id=uuid4(), email="user@acme.com", name="User", password_hash="x", tenant_id=uuid4())


@pytest.fixture
def session_token(user, now):
    return AuthToken(
        id=uuid4(),
        user_id=user.id,
        token_hash=hash_token("session-value"),
        purpose=TokenPurpose.session,
        issued_at=now - timedelta(hours=1),
        expires_at=now + timedelta(hours=1),
    )


@pytest.mark.asyncio
async def test_validate_session_token(mock_uow, clock, user, session_token):
    mock_uow.auth_tokens.get_by_token_hash.return_value = session_token
    mock_uow.users.get_by_id.return_value = user

    context = await ValidateTokenUseCase(mock_uow, clock=clock).execute(
        "session-value", purpose=TokenPurpose.session
    )

    assert context.user.id == str(user.id)
    assert context.user.tenant_id == str(user.tenant_id)
    assert context.purpose == "session"
    assert context.expires_at == session_token.expires_at


@pytest.mark.asyncio
async def test_validate_expired_session(mock_uow, user, session_token):
    mock_uow.auth_tokens.get_by_token_hash.return_value = session_token
    mock_uow.users.get_by_id.return_value = user
    later = session_token.expires_at + timedelta(seconds=1)

    with pytest.raises(TokenExpiredError):
        await ValidateTokenUseCase(mock_uow, clock=lambda: later).execute("session-value")


@pytest.mark.asyncio
async def test_logout_revokes_presented_session(mock_uow, clock, now, user, session_token):
    mock_uow.auth_tokens.get_by_token_hash.return_value = session_token
    mock_uow.users.get_by_id.return_value = user

    result = await LogoutUseCase(mock_uow, clock=clock).execute("session-value")

    assert result.status == "logged_out"
    assert session_token.revoked_at == now
    mock_uow.auth_tokens.update.assert_called_once_with(session_token)
    # Only this session, not every session of the user
    mock_uow.auth_tokens.revoke_live_by_user_id.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_with_revoked_session(mock_uow, clock, now, user, session_token):
    session_token.revoked_at = now - timedelta(minutes=1)
    mock_uow.auth_tokens.get_by_token_hash.return_value = session_token
    mock_uow.users.get_by_id.return_value = user

    with pytest.raises(TokenNotFoundError):
        await LogoutUseCase(mock_uow, clock=clock).execute("session-value")

    mock_uow.commit.assert_not_called()
