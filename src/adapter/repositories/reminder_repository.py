from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.reminder_repository import IReminderRepository
from src.domain.entities import Reminder


class ReminderRepository(IReminderRepository):
    """Reminder repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, reminder: Reminder) -> Reminder:
        """Create a new reminder record"""
        self.session.add(reminder)
        await self.session.flush()
        await self.session.refresh(reminder)
        return reminder

    async def get_by_invitation_id(self, invitation_id: UUID) -> List[Reminder]:
        """All reminder records of an invitation, by sent_at"""
        stmt = (
            select(Reminder)
            .where(Reminder.invitation_id == invitation_id)
            .order_by(Reminder.sent_at, Reminder.reminder_number)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_assessment(self, tenant_id: UUID, assessment_id: UUID) -> List[Reminder]:
        """All reminder records of one assessment within a tenant, by sent_at"""
        stmt = (
            select(Reminder)
            .where(Reminder.tenant_id == tenant_id, Reminder.assessment_id == assessment_id)
            .order_by(Reminder.sent_at, Reminder.reminder_number)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_id(self, reminder_id: UUID) -> Optional[Reminder]:
        """Get reminder record by ID"""
        stmt = select(Reminder).where(Reminder.id == reminder_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()
