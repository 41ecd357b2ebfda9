from datetime import datetime
from uuid import uuid4

import pytest

from src.domain import invitation_lifecycle
from src.domain.entities import Invitation, InvitationStatus
from src.domain.errors import InvalidStateError

NOW = datetime(2025, 3, 4, 12, 0, 0)


def make_invitation(status=InvitationStatus.pending):
    return Invitation(
        tenant_id=uuid4(),
        assessment_id=uuid4(),
        respondent_name="Ana Souza",
        respondent_email="ana@acme.com",
        invite_token="tok",
        status=status,
        sent_at=datetime(2025, 3, 1, 12, 0, 0),
        expires_at=datetime(2025, 3, 15, 12, 0, 0),
        next_reminder_at=datetime(2025, 3, 3, 12, 0, 0),
    )


def test_view_stamps_viewed_at():
    invitation = invitation_lifecycle.transition(make_invitation(), InvitationStatus.viewed, NOW)

    assert invitation.status == InvitationStatus.viewed
    assert invitation.viewed_at == NOW
    assert invitation.next_reminder_at is not None


@pytest.mark.parametrize("start", [InvitationStatus.pending, InvitationStatus.viewed])
def test_complete_clears_next_reminder(start):
    invitation = invitation_lifecycle.transition(
        make_invitation(start), InvitationStatus.completed, NOW
    )

    assert invitation.status == InvitationStatus.completed
    assert invitation.completed_at == NOW
    assert invitation.next_reminder_at is None


def test_expire_clears_next_reminder():
    invitation = invitation_lifecycle.transition(make_invitation(), InvitationStatus.expired, NOW)

    assert invitation.status == InvitationStatus.expired
    assert invitation.next_reminder_at is None


@pytest.mark.parametrize("terminal", [InvitationStatus.completed, InvitationStatus.expired])
@pytest.mark.parametrize(
    "target", [InvitationStatus.viewed, InvitationStatus.completed, InvitationStatus.expired]
)
def test_terminal_states_are_final(terminal, target):
    with pytest.raises(InvalidStateError):
        invitation_lifecycle.transition(make_invitation(terminal), target, NOW)


def test_viewed_cannot_go_back_to_pending():
    assert not invitation_lifecycle.can_transition(
        InvitationStatus.viewed, InvitationStatus.pending
    )


def test_open_statuses():
    assert invitation_lifecycle.is_open(make_invitation(InvitationStatus.pending))
    assert invitation_lifecycle.is_open(make_invitation(InvitationStatus.viewed))
    assert not invitation_lifecycle.is_open(make_invitation(InvitationStatus.completed))
