"""
Black Belt Domain Entities

Each entity in its own file.
"""

# Export all enums
from .enums import (
    UserStatus,
    UserRole,
    TokenPurpose,
    InvitationStatus,
    ReminderStatus,
)

# Export all entities
from .user import User
from .auth_token import AuthToken
from .invitation import Invitation
from .reminder import Reminder
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "UserStatus",
    "UserRole",
    "TokenPurpose",
    "InvitationStatus",
    "ReminderStatus",
    # Entities
    "User",
    "AuthToken",
    "Invitation",
    "Reminder",
    "AuditEvent",
]
