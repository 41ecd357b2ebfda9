"""
Reminder Use Cases

Reminder cadence, invitation expiration and reminder reporting.
"""

from .run_scheduled_pass_use_case import RunScheduledPassUseCase
from .send_manual_reminder_use_case import SendManualReminderUseCase
from .get_reminder_statistics_use_case import GetReminderStatisticsUseCase
from .list_reminders_use_case import ListRemindersUseCase
from .list_assessment_reminders_use_case import ListAssessmentRemindersUseCase
from .get_reminder_use_case import GetReminderUseCase
from .dtos import PassSummary, ReminderInfo, ReminderStatistics

__all__ = [
    "RunScheduledPassUseCase",
    "SendManualReminderUseCase",
    "GetReminderStatisticsUseCase",
    "ListRemindersUseCase",
    "ListAssessmentRemindersUseCase",
    "GetReminderUseCase",
    "PassSummary",
    "ReminderInfo",
    "ReminderStatistics",
]
