"""
Reminder Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Reminder


class ReminderInfo(BaseModel):
    """One reminder dispatch attempt"""

    id: str
    invitation_id: str
    assessment_id: str
    reminder_number: int
    status: str
    sent_at: datetime
    next_reminder_at: Optional[datetime] = None
    error_message: Optional[str] = None

    @classmethod
    def from_entity(cls, reminder: Reminder) -> "ReminderInfo":
        return cls(
            id=str(reminder.id),
            invitation_id=str(reminder.invitation_id),
            assessment_id=str(reminder.assessment_id),
            reminder_number=reminder.reminder_number,
            status=reminder.status.value,
            sent_at=reminder.sent_at,
            next_reminder_at=reminder.next_reminder_at,
            error_message=reminder.error_message,
        )


class PassSummary(BaseModel):
    """What one scheduled pass did"""

    ran_at: datetime
    evaluated: int = 0
    reminders_sent: int = 0
    reminders_failed: int = 0
    expired: int = 0
    errors: int = 0


class ReminderStatistics(BaseModel):
    """Invitation and reminder figures of one assessment"""

    assessment_id: str
    total_invites: int
    completed_invites: int
    pending_invites: int
    expired_invites: int
    response_rate: int
    total_reminders: int
    sent_reminders: int
    failed_reminders: int
    bounced_reminders: int
    average_reminders_per_invite: float
