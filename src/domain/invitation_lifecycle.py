"""
Invitation status transitions.

pending -> viewed -> completed, pending -> completed, and any open
state -> expired. completed and expired are terminal.
"""

from datetime import datetime

from src.domain.entities import Invitation, InvitationStatus
from src.domain.errors import InvalidStateError

OPEN_STATUSES = (InvitationStatus.pending, InvitationStatus.viewed)

_ALLOWED = {
    InvitationStatus.pending: {
        InvitationStatus.viewed,
        InvitationStatus.completed,
        InvitationStatus.expired,
    },
    InvitationStatus.viewed: {InvitationStatus.completed, InvitationStatus.expired},
    InvitationStatus.completed: set(),
    InvitationStatus.expired: set(),
}


def can_transition(current: InvitationStatus, target: InvitationStatus) -> bool:
    return target in _ALLOWED[current]


def is_open(invitation: Invitation) -> bool:
    return invitation.status in OPEN_STATUSES


def transition(invitation: Invitation, target: InvitationStatus, now: datetime) -> Invitation:
    """Apply a status change in place, stamping the matching timestamp."""
    if not can_transition(invitation.status, target):
        raise InvalidStateError(
            f"Invitation cannot move from {invitation.status.value} to {target.value}"
        )

    invitation.status = target
    if target == InvitationStatus.viewed:
        invitation.viewed_at = now
    elif target == InvitationStatus.completed:
        invitation.completed_at = now
        invitation.next_reminder_at = None
    elif target == InvitationStatus.expired:
        invitation.next_reminder_at = None
    return invitation
