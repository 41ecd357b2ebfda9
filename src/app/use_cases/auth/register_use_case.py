"""
Register Use Case

Creates a local account, sends the email verification link and opens
the first login session.
"""

import logging
from typing import Optional
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from src.app.services import messages
from src.app.services.notifier import Notifier
from src.app.services.security import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH, hash_password
from src.app.services.tokens import issue_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, TokenPurpose, User
from src.domain.errors import ValidationError, WeakCredentialError
from .dtos import AuthResponse, UserInfo

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Validate syntax and return the lower-cased address."""
    try:
        validated = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError(f"Invalid email address: {exc}") from exc
    return validated.normalized.lower()


def check_password_strength(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakCredentialError()
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise WeakCredentialError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate email syntax and password length (min 8 chars)
    2. Reject an email that is already registered (case-insensitive)
    3. Hash password with bcrypt
    4. Create User with email_verified=False
    5. Issue an email verification token and a session token
    6. Record AuditEvent(action=register) and commit atomically
    7. Send the verification email (failure is logged, not raised)
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier, clock=utc_now):
        self.uow = uow
        self.notifier = notifier
        self.clock = clock

    async def execute(
        self,
        email: str,
        password: str,
        name: str,
        tenant_id: Optional[UUID] = None,
    ) -> AuthResponse:
        email = normalize_email(email)
        check_password_strength(password)
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required")

        now = self.clock()
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                raise ValidationError("Email already registered", code="EMAIL_ALREADY_REGISTERED")

            user = User(
                email=email,
                name=name,
                password_hash=hash_password(password),
                email_verified=False,
                tenant_id=tenant_id,
                created_at=now,
            )
            user = await self.uow.users.create(user)

            verification_token, _ = await issue_token(
                self.uow, user.id, TokenPurpose.email_verification, now
            )
            session_token, session = await issue_token(
                self.uow, user.id, TokenPurpose.session, now
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=user.id,
                    action="register",
                    event_metadata={"email": email},
                )
            )

            await self.uow.commit()

        subject, body = messages.email_verification(user.name, verification_token)
        delivery = await self.notifier.send(user.email, subject, body)
        if not delivery.delivered:
            logger.warning(f"Verification email not delivered for user {user.id}: {delivery.error}")

        return AuthResponse(
            user=UserInfo.from_entity(user),
            token=session_token,
            expires_at=session.expires_at,
        )
