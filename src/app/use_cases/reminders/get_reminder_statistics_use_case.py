"""
Get Reminder Statistics Use Case

Read-only figures for the reminder management screen.
"""

import math
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import InvitationStatus, ReminderStatus
from src.domain.invitation_lifecycle import OPEN_STATUSES
from .dtos import ReminderStatistics


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class GetReminderStatisticsUseCase:
    """
    Aggregate invitations and reminders of one assessment.

    - response_rate: completed / total as a whole percentage, 0 without invites
    - average_reminders_per_invite: all reminder records / total, one decimal
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, assessment_id: UUID) -> ReminderStatistics:
        async with self.uow:
            invitations = await self.uow.invitations.get_by_assessment(tenant_id, assessment_id)
            reminders = await self.uow.reminders.get_by_assessment(tenant_id, assessment_id)

            total = len(invitations)
            completed = sum(1 for i in invitations if i.status == InvitationStatus.completed)

            return ReminderStatistics(
                assessment_id=str(assessment_id),
                total_invites=total,
                completed_invites=completed,
                pending_invites=sum(1 for i in invitations if i.status in OPEN_STATUSES),
                expired_invites=sum(1 for i in invitations if i.status == InvitationStatus.expired),
                response_rate=int(_round_half_up(completed * 100 / total)) if total else 0,
                total_reminders=len(reminders),
                sent_reminders=sum(1 for r in reminders if r.status == ReminderStatus.sent),
                failed_reminders=sum(1 for r in reminders if r.status == ReminderStatus.failed),
                bounced_reminders=sum(1 for r in reminders if r.status == ReminderStatus.bounced),
                average_reminders_per_invite=(
                    _round_half_up(len(reminders) / total, 1) if total else 0.0
                ),
            )
