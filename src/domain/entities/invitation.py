"""
Invitation Entity

A respondent's assignment to a COPSOQ-II assessment.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import InvitationStatus


class Invitation(SQLModel, table=True):
    """
    Invitation entity - one respondent invited to one assessment.

    Business Rules:
    - Owned by a tenant; other tenants can neither see nor change it
    - Expires 14 days after sent_at
    - pending -> viewed -> completed, or pending/viewed -> expired
    - Never reverts from completed
    - next_reminder_at is the next unfired reminder threshold (None once exhausted)
    - last_reminder_number is the highest reminder number claimed for dispatch;
      it only moves by compare-and-swap, and a failed dispatch gives it back
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(nullable=False, index=True)
    assessment_id: UUID = Field(nullable=False, index=True)

    respondent_name: str = Field(max_length=255)
    respondent_email: str = Field(max_length=320)
    respondent_position: Optional[str] = Field(default=None, max_length=255)

    invite_token: str = Field(unique=True, index=True, max_length=64)
    status: InvitationStatus = Field(default=InvitationStatus.pending)
    last_reminder_number: int = Field(default=0)

    # Timestamps
    sent_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    viewed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    next_reminder_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_status", "status"),
        Index("idx_invitation_tenant_assessment", "tenant_id", "assessment_id"),
        Index("idx_invitation_expires_at", "expires_at"),
    )
