"""
Respond Invitation Use Case

Public respondent side of the invitation lifecycle: opening the survey
link and submitting the answers.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain import invitation_lifecycle, reminder_policy
from src.domain.base import utc_now
from src.domain.entities import InvitationStatus
from src.domain.errors import InvalidStateError, InvitationNotFoundError
from .dtos import RespondentInvitationResponse


class RespondInvitationUseCase:
    """
    Use case for respondent actions on an invitation.

    Business Rules:
    - Opening an expired-but-not-yet-swept invitation expires it
    - Opening a viewed invitation again is a no-op
    - Completed and expired invitations accept no further action
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def mark_viewed(self, invite_token: str) -> RespondentInvitationResponse:
        return await self._apply(invite_token, InvitationStatus.viewed)

    async def complete(self, invite_token: str) -> RespondentInvitationResponse:
        return await self._apply(invite_token, InvitationStatus.completed)

    async def _apply(self, invite_token: str, target: InvitationStatus) -> RespondentInvitationResponse:
        now = self.clock()
        async with self.uow:
            invitation = await self.uow.invitations.get_by_invite_token(invite_token)
            if invitation is None:
                raise InvitationNotFoundError()

            invitation = await self.uow.invitations.get_by_id_for_update(invitation.id)

            if invitation_lifecycle.is_open(invitation) and reminder_policy.is_expired(
                invitation.expires_at, now
            ):
                invitation_lifecycle.transition(invitation, InvitationStatus.expired, now)
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                raise InvalidStateError("Invitation has expired")

            if invitation.status == target == InvitationStatus.viewed:
                return RespondentInvitationResponse(
                    status=invitation.status.value, expires_at=invitation.expires_at
                )

            invitation_lifecycle.transition(invitation, target, now)
            await self.uow.invitations.update(invitation)
            await self.uow.commit()

            return RespondentInvitationResponse(
                status=invitation.status.value, expires_at=invitation.expires_at
            )
