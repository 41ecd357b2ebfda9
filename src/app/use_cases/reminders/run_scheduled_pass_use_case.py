"""
Run Scheduled Pass Use Case

Advances the reminder/expiration lifecycle of every open invitation.
Meant to be triggered hourly by an external cron (see cron.py) or on
demand by an administrator.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.domain import invitation_lifecycle, reminder_policy
from src.domain.base import utc_now
from src.domain.entities import InvitationStatus, ReminderStatus
from .dispatch import dispatch_reminder
from .dtos import PassSummary

logger = logging.getLogger(__name__)


class RunScheduledPassUseCase:
    """
    Use case for one scheduler pass at an injected `now`.

    Business Rules:
    - Only pending and viewed invitations are evaluated
    - now >= expires_at: invitation becomes expired, no reminder
    - Otherwise, when the next unsent reminder threshold (+2/+5/+9 days)
      has passed, exactly one reminder is dispatched
    - Each invitation is evaluated in its own transaction; the reminder
      number is claimed atomically before sending, so a concurrent manual
      reminder cannot fire the same number
    - Re-running with the same `now` sends nothing new (claimed numbers are
      never sent twice)
    - A failure on one invitation is logged and counted; the pass goes on
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, now: Optional[datetime] = None) -> PassSummary:
        now = now or utc_now()
        summary = PassSummary(ran_at=now)

        async with self.uow:
            invitation_ids = await self.uow.invitations.get_open_ids()

        logger.info(f"Reminder pass at {now.isoformat()}: {len(invitation_ids)} open invitations")

        for invitation_id in invitation_ids:
            try:
                await self._evaluate(invitation_id, now, summary)
            except Exception:
                summary.errors += 1
                logger.exception(f"Reminder pass failed for invitation {invitation_id}")

        logger.info(
            f"Reminder pass done: sent={summary.reminders_sent} "
            f"failed={summary.reminders_failed} expired={summary.expired} errors={summary.errors}"
        )
        return summary

    async def _evaluate(self, invitation_id: UUID, now: datetime, summary: PassSummary) -> None:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id_for_update(invitation_id)

            # Completed or expired since the ids were listed
            if invitation is None or not invitation_lifecycle.is_open(invitation):
                return

            summary.evaluated += 1

            if reminder_policy.is_expired(invitation.expires_at, now):
                invitation_lifecycle.transition(invitation, InvitationStatus.expired, now)
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                summary.expired += 1
                logger.info(f"Invitation {invitation_id} expired")
                return

            if not reminder_policy.is_reminder_due(
                invitation.sent_at, invitation.last_reminder_number, now
            ):
                return

            reminder = await dispatch_reminder(self.uow, self.notifier, invitation, now)
            if reminder is None:
                return
            await self.uow.commit()

            if reminder.status == ReminderStatus.sent:
                summary.reminders_sent += 1
            else:
                summary.reminders_failed += 1
