from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Reminder


class IReminderRepository(ABC):
    """Reminder repository interface - application layer"""

    @abstractmethod
    async def create(self, reminder: Reminder) -> Reminder:
        """Create a new reminder record"""
        pass

    @abstractmethod
    async def get_by_invitation_id(self, invitation_id: UUID) -> List[Reminder]:
        """All reminder records of an invitation, oldest first"""
        pass

    @abstractmethod
    async def get_by_assessment(self, tenant_id: UUID, assessment_id: UUID) -> List[Reminder]:
        """All reminder records of one assessment within a tenant"""
        pass

    @abstractmethod
    async def get_by_id(self, reminder_id: UUID) -> Optional[Reminder]:
        """Get reminder record by ID"""
        pass
