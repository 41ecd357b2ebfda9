"""
Login Use Case

Verifies credentials and opens a new login session.
"""

import logging

from src.app.services.security import burn_password_check, verify_password
from src.app.services.tokens import issue_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, TokenPurpose, UserStatus
from src.domain.errors import InvalidCredentialsError
from .dtos import AuthResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email, wrong password and deactivated account give the
      same InvalidCredentialsError (no account enumeration)
    - Each login creates an independent session token
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, email: str, password: str) -> AuthResponse:
        now = self.clock()
        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip().lower())

            # Always perform a hash check even if user not found
            if user is None:
                burn_password_check(password)
                raise InvalidCredentialsError()

            if not verify_password(password, user.password_hash):
                raise InvalidCredentialsError()

            if user.status != UserStatus.active:
                logger.info(f"Login refused for deactivated user {user.id}")
                raise InvalidCredentialsError()

            token, session = await issue_token(self.uow, user.id, TokenPurpose.session, now)

            user.last_login_at = now
            await self.uow.users.update(user)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=user.tenant_id,
                    user_id=user.id,
                    action="login",
                    event_metadata={"session_id": str(session.id)},
                )
            )

            await self.uow.commit()

            return AuthResponse(
                user=UserInfo.from_entity(user),
                token=token,
                expires_at=session.expires_at,
            )
