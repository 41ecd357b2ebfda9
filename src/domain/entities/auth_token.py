"""
AuthToken Entity

Opaque bearer tokens for sessions, email verification and password reset.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import TokenPurpose


class AuthToken(SQLModel, table=True):
    """
    AuthToken entity - one issued bearer credential.

    Business Rules:
    - Only the SHA-256 hash of the bearer value is stored
    - Valid only before expires_at and only for its purpose
    - issued -> consumed | revoked | expired, all terminal
    - email_verification and password_reset tokens are single-use
    """

    __tablename__ = "auth_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 output
    purpose: TokenPurpose = Field(nullable=False)

    # Timestamps
    issued_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    consumed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_auth_token_user_purpose", "user_id", "purpose"),
        Index("idx_auth_token_expires_at", "expires_at"),
    )

    @property
    def is_live(self) -> bool:
        """Not yet consumed or revoked. Expiry is checked separately."""
        return self.consumed_at is None and self.revoked_at is None
