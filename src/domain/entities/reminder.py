"""
Reminder Entity

One notification attempt for an unanswered invitation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import ReminderStatus


class Reminder(SQLModel, table=True):
    """
    Reminder entity - one dispatch attempt tied to an invitation.

    Business Rules:
    - reminder_number is 1, 2 or 3
    - At most one sent reminder per (invitation, reminder_number)
    - Failed attempts are kept for reporting and do not use up a number
    """

    __tablename__ = "reminders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    invitation_id: UUID = Field(foreign_key="invitations.id", nullable=False, index=True)
    tenant_id: UUID = Field(nullable=False)
    assessment_id: UUID = Field(nullable=False, index=True)

    reminder_number: int = Field(ge=1, le=3)
    status: ReminderStatus = Field(default=ReminderStatus.sent)
    error_message: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    sent_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    next_reminder_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "uq_reminder_sent_sequence",
            "invitation_id",
            "reminder_number",
            unique=True,
            sqlite_where=text("status = 'sent'"),
            postgresql_where=text("status = 'sent'"),
        ),
        Index("idx_reminder_tenant_assessment", "tenant_id", "assessment_id"),
    )
