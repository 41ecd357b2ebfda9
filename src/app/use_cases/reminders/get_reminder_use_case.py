"""
Get Reminder Use Case

Details of a single reminder attempt, for the reminder management screen.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ReminderNotFoundError
from .dtos import ReminderInfo


class GetReminderUseCase:
    """
    Use case for reading one reminder record.

    Business Rules:
    - Reminders of another tenant are reported as not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, reminder_id: UUID) -> ReminderInfo:
        async with self.uow:
            reminder = await self.uow.reminders.get_by_id(reminder_id)
            if reminder is None or reminder.tenant_id != tenant_id:
                raise ReminderNotFoundError()

            return ReminderInfo.from_entity(reminder)
