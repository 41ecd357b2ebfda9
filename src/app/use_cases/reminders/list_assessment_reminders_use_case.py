from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from .dtos import ReminderInfo


class ListAssessmentRemindersUseCase:
    """Every reminder attempt of one assessment, oldest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, assessment_id: UUID) -> List[ReminderInfo]:
        async with self.uow:
            reminders = await self.uow.reminders.get_by_assessment(tenant_id, assessment_id)
            return [ReminderInfo.from_entity(r) for r in reminders]
