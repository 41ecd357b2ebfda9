"""
Request Password Reset Use Case

Handles generating and sending password reset tokens.
"""

import logging

from src.app.services import messages
from src.app.services.notifier import Notifier
from src.app.services.tokens import issue_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, TokenPurpose, UserStatus
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - No email enumeration (same response for valid/invalid emails)
    - Token expires in 1 hour by default and is single-use
    - A new request revokes the previous reset token
    - Delivery failures are logged, never surfaced
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier, clock=utc_now):
        self.uow = uow
        self.notifier = notifier
        self.clock = clock

    async def execute(self, email: str) -> MessageResponse:
        response = MessageResponse(status="sent", message=RESET_REQUESTED_MESSAGE)
        now = self.clock()

        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip().lower())
            if user is None or user.status != UserStatus.active:
                return response

            token, record = await issue_token(
                self.uow, user.id, TokenPurpose.password_reset, now
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=None,  # No tenant context for password reset
                    user_id=user.id,
                    action="password_reset_requested",
                    event_metadata={"token_id": str(record.id)},
                )
            )

            await self.uow.commit()

        subject, body = messages.password_reset(user.name, token)
        delivery = await self.notifier.send(user.email, subject, body)
        if not delivery.delivered:
            logger.warning(f"Password reset email not delivered for user {user.id}: {delivery.error}")

        return response
