"""
User Entity

Represents a person who signs in to the platform.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - represents a person who signs in to the platform.

    Business Rules:
    - Email is unique and stored lower-cased (case-insensitive uniqueness)
    - Password stored as bcrypt hash
    - Never hard-deleted: deactivation is a status change
    - tenant_id scopes the invitations and reminders the user can manage
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=320)
    name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.user)
    status: UserStatus = Field(default=UserStatus.active)
    email_verified: bool = Field(default=False)

    tenant_id: Optional[UUID] = Field(default=None, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_status", "status"),)
