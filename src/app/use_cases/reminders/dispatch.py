"""
Sending one reminder and recording the attempt.

Shared by the scheduled pass and the manual trigger. The reminder number
is claimed (compare-and-swap on Invitation.last_reminder_number) and
committed before the notifier is called, so a pass and a manual trigger
racing on the same invitation cannot both send it. The outcome is written
in a second transaction that the caller commits.
"""

import logging
from datetime import datetime
from typing import Optional

from src.app.services import messages
from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.domain import reminder_policy
from src.domain.entities import Invitation, Reminder, ReminderStatus

logger = logging.getLogger(__name__)


async def dispatch_reminder(
    uow: UnitOfWork,
    notifier: Notifier,
    invitation: Invitation,
    now: datetime,
) -> Optional[Reminder]:
    """
    Claim, send and record the next reminder of `invitation`.

    Returns None when another caller already claimed that number.

    A failed send is stored with status=failed and gives the number back:
    last_reminder_number and next_reminder_at return to their previous
    values so the next pass retries it.
    """
    invitation_id = invitation.id
    reminder_number = invitation.last_reminder_number + 1
    sent_at, tenant_id, assessment_id = (
        invitation.sent_at,
        invitation.tenant_id,
        invitation.assessment_id,
    )
    recipient = invitation.respondent_email
    subject, body = messages.survey_reminder(
        invitation.respondent_name, invitation.invite_token, reminder_number
    )

    if not await uow.invitations.claim_reminder(invitation_id, reminder_number):
        logger.info(f"Reminder {reminder_number} for invitation {invitation_id} already claimed")
        return None
    await uow.commit()

    delivery = await notifier.send(recipient, subject, body)

    if delivery.delivered:
        status = ReminderStatus.sent
        next_at = reminder_policy.next_reminder_at(sent_at, reminder_number)
        owns_schedule = True
        logger.info(f"Reminder {reminder_number} sent for invitation {invitation_id}")
    else:
        status = ReminderStatus.failed
        next_at = reminder_policy.reminder_due_at(sent_at, reminder_number)
        owns_schedule = await uow.invitations.release_reminder(invitation_id, reminder_number)
        logger.warning(
            f"Reminder {reminder_number} failed for invitation {invitation_id}: {delivery.error}"
        )

    reminder = Reminder(
        invitation_id=invitation_id,
        tenant_id=tenant_id,
        assessment_id=assessment_id,
        reminder_number=reminder_number,
        status=status,
        error_message=(delivery.error or "Unknown error")[:1000] if not delivery.delivered else None,
        sent_at=now,
        next_reminder_at=next_at,
        created_at=now,
    )
    reminder = await uow.reminders.create(reminder)

    invitation = await uow.invitations.get_by_id_for_update(invitation_id)
    # A later number claimed in the meantime owns next_reminder_at
    if owns_schedule and invitation.last_reminder_number <= reminder_number:
        invitation.next_reminder_at = next_at
        await uow.invitations.update(invitation)

    return reminder
