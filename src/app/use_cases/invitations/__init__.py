"""
Invitation Use Cases

Survey invitations sent to respondents of an assessment.
"""

from .create_invitation_use_case import CreateInvitationUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .respond_invitation_use_case import RespondInvitationUseCase
from .dtos import CreateInvitationResponse, InvitationInfo, RespondentInvitationResponse

__all__ = [
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "RespondInvitationUseCase",
    "CreateInvitationResponse",
    "InvitationInfo",
    "RespondentInvitationResponse",
]
