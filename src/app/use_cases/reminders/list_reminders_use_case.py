from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import InvitationNotFoundError
from .dtos import ReminderInfo


class ListRemindersUseCase:
    """Reminder history of one invitation, oldest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, invitation_id: UUID) -> List[ReminderInfo]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.tenant_id != tenant_id:
                raise InvitationNotFoundError()

            reminders = await self.uow.reminders.get_by_invitation_id(invitation_id)
            return [ReminderInfo.from_entity(r) for r in reminders]
