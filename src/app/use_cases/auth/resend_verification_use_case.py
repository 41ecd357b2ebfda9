"""
Resend Verification Use Case

Issues a fresh email verification token.
"""

import logging

from src.app.services import messages
from src.app.services.notifier import Notifier
from src.app.services.tokens import issue_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import TokenPurpose, UserStatus
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

RESEND_MESSAGE = "If the account exists and is not verified, a verification email has been sent"


class ResendVerificationUseCase:
    """
    Use case for resending the verification email.

    Business Rules:
    - Same response whether or not the email exists (no enumeration)
    - Previous verification token is revoked
    - Already verified or deactivated accounts get nothing
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier, clock=utc_now):
        self.uow = uow
        self.notifier = notifier
        self.clock = clock

    async def execute(self, email: str) -> MessageResponse:
        response = MessageResponse(status="sent", message=RESEND_MESSAGE)
        now = self.clock()

        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip().lower())
            if user is None or user.email_verified or user.status != UserStatus.active:
                return response

            token, _ = await issue_token(
                self.uow, user.id, TokenPurpose.email_verification, now
            )
            await self.uow.commit()

        subject, body = messages.email_verification(user.name, token)
        delivery = await self.notifier.send(user.email, subject, body)
        if not delivery.delivered:
            logger.warning(f"Verification email not delivered for user {user.id}: {delivery.error}")

        return response
