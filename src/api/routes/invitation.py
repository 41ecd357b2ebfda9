from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import TokenContext
from src.app.use_cases.invitations import (
    CreateInvitationResponse,
    CreateInvitationUseCase,
    InvitationInfo,
    ListInvitationsUseCase,
    RespondentInvitationResponse,
    RespondInvitationUseCase,
)
from src.depends import get_notifier, get_tenant_user, get_unit_of_work

router = APIRouter(tags=["Invitations"])


class CreateInvitationRequest(BaseModel):
    """Create invitation HTTP request payload"""

    respondent_name: str = Field(..., min_length=1, max_length=255)
    respondent_email: str = Field(..., max_length=320, description="Respondent email address")
    respondent_position: Optional[str] = Field(None, max_length=255)


@router.post(
    "/assessments/{assessment_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateInvitationResponse,
)
async def create_invitation(
    assessment_id: UUID,
    request: CreateInvitationRequest,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Invite a respondent to an assessment.

    The invitation is stored even when the email could not be delivered
    (delivered=false); the reminder cadence keeps trying.
    """
    use_case = CreateInvitationUseCase(uow, notifier)
    return await use_case.execute(
        tenant_id=UUID(current_user.user.tenant_id),
        inviter_user_id=UUID(current_user.user.id),
        assessment_id=assessment_id,
        respondent_name=request.respondent_name,
        respondent_email=request.respondent_email,
        respondent_position=request.respondent_position,
    )


@router.get(
    "/assessments/{assessment_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=List[InvitationInfo],
)
async def list_invitations(
    assessment_id: UUID,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListInvitationsUseCase(uow)
    return await use_case.execute(UUID(current_user.user.tenant_id), assessment_id)


@router.post(
    "/invitations/respond/{invite_token}/view",
    status_code=status.HTTP_200_OK,
    response_model=RespondentInvitationResponse,
)
async def view_invitation(invite_token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Respondent opened the survey link (public, authenticated by invite token).

    Raises:
        - 404 Not Found: Unknown invite token
        - 409 Conflict: Invitation completed or expired
    """
    use_case = RespondInvitationUseCase(uow)
    return await use_case.mark_viewed(invite_token)


@router.post(
    "/invitations/respond/{invite_token}/complete",
    status_code=status.HTTP_200_OK,
    response_model=RespondentInvitationResponse,
)
async def complete_invitation(invite_token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Respondent submitted the survey (public, authenticated by invite token).

    Raises:
        - 404 Not Found: Unknown invite token
        - 409 Conflict: Invitation completed or expired
    """
    use_case = RespondInvitationUseCase(uow)
    return await use_case.complete(invite_token)
