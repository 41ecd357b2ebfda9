"""
Reset Password Use Case

Consumes a password reset token and replaces the credential.
"""

from src.app.services.security import hash_password
from src.app.services.tokens import resolve_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, TokenPurpose
from src.domain.errors import TokenNotFoundError
from .dtos import MessageResponse
from .register_use_case import check_password_strength


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - New password must be at least 8 characters
    - Token purpose must be password_reset, not expired, not consumed
    - Token is consumed with a conditional write (works exactly once,
      even under concurrent requests)
    - Every login session of the user is revoked (re-login everywhere)
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str, new_password: str) -> MessageResponse:
        check_password_strength(new_password)
        password_hash = hash_password(new_password)

        now = self.clock()
        async with self.uow:
            record, user = await resolve_token(
                self.uow, token, now, purpose=TokenPurpose.password_reset
            )
            # Two requests racing on one token: only one consumes it
            if not await self.uow.auth_tokens.consume(record.id, now):
                raise TokenNotFoundError()

            user.password_hash = password_hash
            await self.uow.users.update(user)

            revoked_count = await self.uow.auth_tokens.revoke_live_by_user_id(
                user.id, now, purpose=TokenPurpose.session
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=None,
                    user_id=user.id,
                    action="password_reset_confirmed",
                    event_metadata={
                        "token_id": str(record.id),
                        "sessions_revoked": revoked_count,
                    },
                )
            )

            await self.uow.commit()

        return MessageResponse(status="success", message="Password has been reset successfully")
