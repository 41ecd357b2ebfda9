"""
Logout Use Case

Revokes exactly the presented session token.
"""

from src.app.services.tokens import resolve_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, TokenPurpose
from .dtos import MessageResponse


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - Only the presented session is revoked
    - Other sessions of the same user stay valid
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> MessageResponse:
        now = self.clock()
        async with self.uow:
            record, user = await resolve_token(
                self.uow, token, now, purpose=TokenPurpose.session
            )

            record.revoked_at = now
            await self.uow.auth_tokens.update(record)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=user.tenant_id,
                    user_id=user.id,
                    action="logout",
                    event_metadata={"session_id": str(record.id)},
                )
            )

            await self.uow.commit()

        return MessageResponse(status="logged_out", message="Session closed")
