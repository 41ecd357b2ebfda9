"""
Create Invitation Use Case

Assigns a COPSOQ-II assessment to one respondent and emails the link.
"""

import logging
import secrets
from typing import Optional
from uuid import UUID

from src.app.services import messages
from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.register_use_case import normalize_email
from src.domain import reminder_policy
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, Invitation, InvitationStatus
from src.domain.errors import ValidationError
from .dtos import CreateInvitationResponse, InvitationInfo

logger = logging.getLogger(__name__)


class CreateInvitationUseCase:
    """
    Use case for inviting a respondent to an assessment.

    Business Rules:
    - Invitation belongs to the inviter's tenant
    - sent_at = now, expires_at = now + 14 days
    - First reminder scheduled for now + 2 days
    - Invite token is cryptographically secure and unique
    - Invitation is kept even if the email could not be delivered;
      the reminder cadence will retry the respondent
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier, clock=utc_now):
        self.uow = uow
        self.notifier = notifier
        self.clock = clock

    async def execute(
        self,
        tenant_id: UUID,
        inviter_user_id: UUID,
        assessment_id: UUID,
        respondent_name: str,
        respondent_email: str,
        respondent_position: Optional[str] = None,
    ) -> CreateInvitationResponse:
        respondent_email = normalize_email(respondent_email)
        respondent_name = (respondent_name or "").strip()
        if not respondent_name:
            raise ValidationError("Respondent name is required")

        now = self.clock()
        async with self.uow:
            invitation = Invitation(
                tenant_id=tenant_id,
                assessment_id=assessment_id,
                respondent_name=respondent_name,
                respondent_email=respondent_email,
                respondent_position=respondent_position,
                invite_token=secrets.token_urlsafe(32),
                status=InvitationStatus.pending,
                sent_at=now,
                expires_at=reminder_policy.expires_at_for(now),
                next_reminder_at=reminder_policy.next_reminder_at(now, 0),
                created_at=now,
            )
            invitation = await self.uow.invitations.create(invitation)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=inviter_user_id,
                    action="invitation_created",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "assessment_id": str(assessment_id),
                    },
                )
            )

            await self.uow.commit()

        subject, body = messages.survey_invitation(
            invitation.respondent_name,
            invitation.invite_token,
            reminder_policy.INVITATION_TTL_DAYS,
        )
        delivery = await self.notifier.send(invitation.respondent_email, subject, body)
        if not delivery.delivered:
            logger.warning(f"Invitation {invitation.id} email not delivered: {delivery.error}")

        return CreateInvitationResponse(
            invitation=InvitationInfo.from_entity(invitation),
            delivered=delivery.delivered,
        )
