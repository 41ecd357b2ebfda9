"""
Invitation Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Invitation


class InvitationInfo(BaseModel):
    """Invitation as shown to tenant administrators"""

    id: str
    assessment_id: str
    respondent_name: str
    respondent_email: str
    respondent_position: Optional[str] = None
    status: str
    sent_at: datetime
    expires_at: datetime
    viewed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    next_reminder_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, invitation: Invitation) -> "InvitationInfo":
        return cls(
            id=str(invitation.id),
            assessment_id=str(invitation.assessment_id),
            respondent_name=invitation.respondent_name,
            respondent_email=invitation.respondent_email,
            respondent_position=invitation.respondent_position,
            status=invitation.status.value,
            sent_at=invitation.sent_at,
            expires_at=invitation.expires_at,
            viewed_at=invitation.viewed_at,
            completed_at=invitation.completed_at,
            next_reminder_at=invitation.next_reminder_at,
        )


class CreateInvitationResponse(BaseModel):
    """Response for create invitation use case"""

    invitation: InvitationInfo
    delivered: bool


class RespondentInvitationResponse(BaseModel):
    """What a respondent sees after opening or finishing the survey"""

    status: str
    expires_at: datetime
