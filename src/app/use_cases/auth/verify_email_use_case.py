"""
Verify Email Use Case

Handles email verification via single-use token.
"""

from src.app.services.tokens import resolve_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, TokenPurpose
from src.domain.errors import TokenNotFoundError
from .dtos import MessageResponse


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token purpose must be email_verification
    - Token must not be expired (24 hours by default)
    - Sets email_verified = True and consumes the token
    - Re-using a consumed token raises TokenNotFoundError
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> MessageResponse:
        now = self.clock()
        async with self.uow:
            record, user = await resolve_token(
                self.uow, token, now, purpose=TokenPurpose.email_verification
            )
            if not await self.uow.auth_tokens.consume(record.id, now):
                raise TokenNotFoundError()

            user.email_verified = True
            await self.uow.users.update(user)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=user.tenant_id,
                    user_id=user.id,
                    action="email_verified",
                    event_metadata={"email": user.email},
                )
            )

            await self.uow.commit()

        return MessageResponse(status="verified", message="Email successfully verified")
