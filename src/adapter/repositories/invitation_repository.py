from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation
from src.domain.invitation_lifecycle import OPEN_STATUSES


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id_for_update(self, invitation_id: UUID) -> Optional[Invitation]:
        """
        Get invitation by ID with SELECT ... FOR UPDATE.

        populate_existing reloads an instance already in the identity map, so
        the caller always sees the row state as of acquiring the lock.
        SQLite ignores FOR UPDATE; writers that must not race go through
        claim_reminder instead.
        """
        stmt = (
            select(Invitation)
            .where(Invitation.id == invitation_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_invite_token(self, invite_token: str) -> Optional[Invitation]:
        """Get invitation by its public invite token"""
        stmt = select(Invitation).where(Invitation.invite_token == invite_token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_assessment(self, tenant_id: UUID, assessment_id: UUID) -> List[Invitation]:
        """Get all invitations of one assessment within a tenant"""
        stmt = (
            select(Invitation)
            .where(Invitation.tenant_id == tenant_id, Invitation.assessment_id == assessment_id)
            .order_by(Invitation.sent_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_open_ids(self) -> List[UUID]:
        """IDs of every pending or viewed invitation, oldest first"""
        stmt = (
            select(Invitation.id)
            .where(Invitation.status.in_(OPEN_STATUSES))
            .order_by(Invitation.sent_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def claim_reminder(self, invitation_id: UUID, reminder_number: int) -> bool:
        """
        Compare-and-swap last_reminder_number from reminder_number - 1.

        A single conditional UPDATE: concurrent claimers of the same number
        are serialized by the database and all but one see rowcount 0.
        """
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.last_reminder_number == reminder_number - 1,
                Invitation.status.in_(OPEN_STATUSES),
            )
            .values(last_reminder_number=reminder_number)
        )
        return await self._execute_for_rowcount(stmt) == 1

    async def release_reminder(self, invitation_id: UUID, reminder_number: int) -> bool:
        """Compare-and-swap last_reminder_number back to reminder_number - 1"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.last_reminder_number == reminder_number,
            )
            .values(last_reminder_number=reminder_number - 1)
        )
        return await self._execute_for_rowcount(stmt) == 1

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def _execute_for_rowcount(self, stmt) -> int:
        # Core execution: the identity map is left alone, callers re-read
        # with get_by_id_for_update when they need the new value
        connection = await self.session.connection()
        result = await connection.execute(stmt)
        return result.rowcount
