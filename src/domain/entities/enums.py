"""
Black Belt Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    deactivated = "deactivated"


class UserRole(str, Enum):
    """Platform role of a user"""

    user = "user"
    admin = "admin"


class TokenPurpose(str, Enum):
    """What an opaque bearer token may be used for"""

    session = "session"
    email_verification = "email_verification"
    password_reset = "password_reset"


class InvitationStatus(str, Enum):
    """COPSOQ-II survey invitation status"""

    pending = "pending"
    viewed = "viewed"
    completed = "completed"
    expired = "expired"


class ReminderStatus(str, Enum):
    """Outcome of one reminder dispatch"""

    sent = "sent"
    failed = "failed"
    bounced = "bounced"
