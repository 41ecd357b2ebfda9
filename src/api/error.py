from fastapi import status

from src.domain.errors import DomainError

STATUS_BY_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "EMAIL_ALREADY_REGISTERED": status.HTTP_409_CONFLICT,
    "WEAK_CREDENTIAL": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_NOT_FOUND": status.HTTP_401_UNAUTHORIZED,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REMINDER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_STATE": status.HTTP_409_CONFLICT,
    "REMINDER_LIMIT_EXCEEDED": status.HTTP_409_CONFLICT,
    "DISPATCH_FAILED": status.HTTP_502_BAD_GATEWAY,
}


class ClientError(Exception):
    def __init__(self, base_error: DomainError, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ClientError":
        return cls(error, status_code=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST))


class ServerError(Exception):
    def __init__(self, base_error: DomainError):
        self.base_error = base_error
        super().__init__(base_error.message)
