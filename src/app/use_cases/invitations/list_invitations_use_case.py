from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from .dtos import InvitationInfo


class ListInvitationsUseCase:
    """Invitations of one assessment, restricted to the caller's tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, assessment_id: UUID) -> List[InvitationInfo]:
        async with self.uow:
            invitations = await self.uow.invitations.get_by_assessment(tenant_id, assessment_id)
            return [InvitationInfo.from_entity(i) for i in invitations]
