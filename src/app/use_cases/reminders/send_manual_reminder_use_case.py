"""
Send Manual Reminder Use Case

Lets a tenant administrator nudge a respondent outside the cadence.
"""

from uuid import UUID

from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.domain import invitation_lifecycle, reminder_policy
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, InvitationStatus, ReminderStatus
from src.domain.errors import (
    DispatchFailure,
    InvalidStateError,
    InvitationNotFoundError,
    ReminderLimitExceededError,
)
from .dispatch import dispatch_reminder
from .dtos import ReminderInfo


class SendManualReminderUseCase:
    """
    Use case for sending the next reminder immediately.

    Business Rules:
    - Invitation must belong to the caller's tenant
    - Completed or expired invitations raise InvalidStateError
    - At most 3 sent reminders (ReminderLimitExceededError)
    - Uses the next sequence number; later cadence thresholds are unchanged
    - Loses to a concurrent dispatch of the same number with InvalidStateError
    - A failed send is recorded, committed, then raised as DispatchFailure
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier, clock=utc_now):
        self.uow = uow
        self.notifier = notifier
        self.clock = clock

    async def execute(self, tenant_id: UUID, user_id: UUID, invitation_id: UUID) -> ReminderInfo:
        now = self.clock()
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id_for_update(invitation_id)
            if invitation is None or invitation.tenant_id != tenant_id:
                raise InvitationNotFoundError()

            if invitation_lifecycle.is_open(invitation) and reminder_policy.is_expired(
                invitation.expires_at, now
            ):
                invitation_lifecycle.transition(invitation, InvitationStatus.expired, now)
                await self.uow.invitations.update(invitation)
                await self.uow.commit()

            if not invitation_lifecycle.is_open(invitation):
                raise InvalidStateError(
                    f"Cannot remind a {invitation.status.value} invitation"
                )

            if invitation.last_reminder_number >= reminder_policy.MAX_REMINDERS:
                raise ReminderLimitExceededError()

            reminder = await dispatch_reminder(self.uow, self.notifier, invitation, now)
            if reminder is None:
                raise InvalidStateError("Another reminder for this invitation is being sent")

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=user_id,
                    action="reminder_sent_manually",
                    event_metadata={
                        "invitation_id": str(invitation_id),
                        "reminder_number": reminder.reminder_number,
                        "status": reminder.status.value,
                    },
                )
            )

            await self.uow.commit()

        if reminder.status == ReminderStatus.failed:
            raise DispatchFailure(
                f"Reminder {reminder.reminder_number} could not be delivered; "
                "it will be retried by the next scheduled pass"
            )

        return ReminderInfo.from_entity(reminder)
