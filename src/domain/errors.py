"""
Domain Errors

Every error carries a stable machine code and a user facing message.
The API layer maps codes to HTTP status codes.
"""


class DomainError(Exception):
    code = "DOMAIN_ERROR"
    message = "Request could not be completed"

    def __init__(self, message: str = None, code: str = None):
        self.message = message or self.message
        self.code = code or self.code
        super().__init__(self.message)


class ValidationError(DomainError):
    """Malformed input, the caller can correct it and retry"""

    code = "VALIDATION_ERROR"
    message = "Invalid input"


class WeakCredentialError(DomainError):
    code = "WEAK_CREDENTIAL"
    message = "Password must be at least 8 characters long"


class InvalidCredentialsError(DomainError):
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class TokenExpiredError(DomainError):
    code = "TOKEN_EXPIRED"
    message = "Token has expired"


class TokenNotFoundError(DomainError):
    code = "TOKEN_NOT_FOUND"
    message = "Invalid or unknown token"


class InvitationNotFoundError(DomainError):
    code = "INVITATION_NOT_FOUND"
    message = "Invitation not found"


class ReminderNotFoundError(DomainError):
    code = "REMINDER_NOT_FOUND"
    message = "Reminder not found"


class InvalidStateError(DomainError):
    """Operation conflicts with the entity lifecycle"""

    code = "INVALID_STATE"
    message = "Operation not allowed in the current state"


class ReminderLimitExceededError(DomainError):
    code = "REMINDER_LIMIT_EXCEEDED"
    message = "Maximum number of reminders (3) already sent"


class DispatchFailure(DomainError):
    """Notification could not be delivered; recorded and retried later"""

    code = "DISPATCH_FAILED"
    message = "Notification could not be delivered"


class UserNotFoundError(DomainError):
    code = "USER_NOT_FOUND"
    message = "User not found"
