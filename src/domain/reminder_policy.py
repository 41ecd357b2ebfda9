"""
Reminder cadence for survey invitations.

Reminder N is due REMINDER_OFFSET_DAYS[N - 1] days after the invitation
was sent; the invitation expires INVITATION_TTL_DAYS after it was sent.
"""

from datetime import datetime, timedelta
from typing import Optional

REMINDER_OFFSET_DAYS = (2, 5, 9)
MAX_REMINDERS = len(REMINDER_OFFSET_DAYS)
INVITATION_TTL_DAYS = 14


def expires_at_for(sent_at: datetime) -> datetime:
    return sent_at + timedelta(days=INVITATION_TTL_DAYS)


def reminder_due_at(sent_at: datetime, reminder_number: int) -> Optional[datetime]:
    """Threshold of the given 1-based reminder, None past the last one."""
    if reminder_number < 1 or reminder_number > MAX_REMINDERS:
        return None
    return sent_at + timedelta(days=REMINDER_OFFSET_DAYS[reminder_number - 1])


def next_reminder_at(sent_at: datetime, sent_count: int) -> Optional[datetime]:
    """Threshold of the first reminder not yet sent."""
    return reminder_due_at(sent_at, sent_count + 1)


def is_reminder_due(sent_at: datetime, sent_count: int, now: datetime) -> bool:
    due_at = next_reminder_at(sent_at, sent_count)
    return due_at is not None and now >= due_at


def is_expired(expires_at: datetime, now: datetime) -> bool:
    return now >= expires_at
