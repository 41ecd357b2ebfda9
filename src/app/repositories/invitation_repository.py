from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID, locking the row until the transaction ends"""
        pass

    @abstractmethod
    async def get_by_invite_token(self, invite_token: str) -> Optional[Invitation]:
        """Get invitation by its public invite token"""
        pass

    @abstractmethod
    async def get_by_assessment(self, tenant_id: UUID, assessment_id: UUID) -> List[Invitation]:
        """Get all invitations of one assessment within a tenant"""
        pass

    @abstractmethod
    async def get_open_ids(self) -> List[UUID]:
        """IDs of every pending or viewed invitation, across tenants"""
        pass

    @abstractmethod
    async def claim_reminder(self, invitation_id: UUID, reminder_number: int) -> bool:
        """
        Atomically move last_reminder_number from reminder_number - 1 to
        reminder_number on an open invitation. False if someone else got there first.
        """
        pass

    @abstractmethod
    async def release_reminder(self, invitation_id: UUID, reminder_number: int) -> bool:
        """Give back a claimed reminder number unless a later one was claimed since"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass
