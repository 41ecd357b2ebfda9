"""
Issuing and resolving opaque bearer tokens.

Tokens are persisted as AuthToken rows keyed by the SHA-256 of the bearer
value, so every server instance sees the same session state.
"""

from datetime import datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from config import ApplicationConfig
from src.app.services.security import generate_token, hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuthToken, TokenPurpose, User, UserStatus
from src.domain.errors import TokenExpiredError, TokenNotFoundError

SINGLE_USE_PURPOSES = (TokenPurpose.email_verification, TokenPurpose.password_reset)


def token_ttl(purpose: TokenPurpose) -> timedelta:
    if purpose == TokenPurpose.session:
        return timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS)
    if purpose == TokenPurpose.email_verification:
        return timedelta(hours=ApplicationConfig.EMAIL_VERIFICATION_TTL_HOURS)
    return timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TTL_MINUTES)


async def issue_token(
    uow: UnitOfWork, user_id: UUID, purpose: TokenPurpose, now: datetime
) -> Tuple[str, AuthToken]:
    """
    Persist a new token and return (bearer value, record).

    Single-use purposes keep at most one live token per user: any earlier
    live token of the same purpose is revoked first.
    """
    if purpose in SINGLE_USE_PURPOSES:
        await uow.auth_tokens.revoke_live_by_user_id(user_id, now, purpose=purpose)

    value = generate_token()
    record = AuthToken(
        user_id=user_id,
        token_hash=hash_token(value),
        purpose=purpose,
        issued_at=now,
        expires_at=now + token_ttl(purpose),
    )
    record = await uow.auth_tokens.create(record)
    return value, record


async def resolve_token(
    uow: UnitOfWork, value: str, now: datetime, purpose: Optional[TokenPurpose] = None
) -> Tuple[AuthToken, User]:
    """
    Look up a live token and its owner.

    Raises TokenNotFoundError for unknown, consumed, revoked or wrong-purpose
    tokens and for deactivated owners; TokenExpiredError once expires_at
    has passed.
    """
    record = await uow.auth_tokens.get_by_token_hash(hash_token(value))
    if record is None or not record.is_live:
        raise TokenNotFoundError()
    if purpose is not None and record.purpose != purpose:
        raise TokenNotFoundError()
    if now >= record.expires_at:
        raise TokenExpiredError()

    user = await uow.users.get_by_id(record.user_id)
    if user is None or user.status != UserStatus.active:
        raise TokenNotFoundError()

    return record, user
