from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    LogoutUseCase,
    MessageResponse,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    ResendVerificationUseCase,
    ResetPasswordUseCase,
    TokenContext,
    UserInfo,
    VerifyEmailUseCase,
)
from src.depends import get_bearer_token, get_current_user, get_notifier, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Email syntax and password strength are checked by the use case, so they
    surface as VALIDATION_ERROR and WEAK_CREDENTIAL (400) instead of a
    generic 422.
    """

    email: str = Field(..., max_length=320, description="User email address")
    password: str = Field(..., description="User password (min 8 chars)")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    User Registration

    Creates the account, emails a verification link and returns a session token.

    Raises:
        - 400 Bad Request: Invalid email or weak password
        - 409 Conflict: Email already registered
    """
    use_case = RegisterUseCase(uow, notifier)
    return await use_case.execute(request.email, request.password, request.name)


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., max_length=320, description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials (same answer for unknown email,
          wrong password and deactivated account)
    """
    use_case = LoginUseCase(uow)
    return await use_case.execute(request.email, request.password)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Revoke the presented session token only"""
    use_case = LogoutUseCase(uow)
    return await use_case.execute(token)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def me(current_user: TokenContext = Depends(get_current_user)):
    """Current user resolved from the bearer session token"""
    return current_user.user


class TokenRequest(BaseModel):
    """Single-use token HTTP request payload"""

    token: str = Field(..., min_length=1, description="Token received by email")


@router.post("/verify-email", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def verify_email(request: TokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Email Verification

    Raises:
        - 401 Unauthorized: Unknown, used or expired token
    """
    use_case = VerifyEmailUseCase(uow)
    return await use_case.execute(request.token)


class EmailRequest(BaseModel):
    email: str = Field(..., max_length=320, description="User email address")


@router.post(
    "/resend-verification", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def resend_verification(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Resend Verification Email

    Always answers with the same message, whether or not the email exists.
    """
    use_case = ResendVerificationUseCase(uow, notifier)
    return await use_case.execute(request.email)


@router.post(
    "/request-password-reset", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def request_password_reset(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Request Password Reset

    Always answers with the same message, whether or not the email exists.
    """
    use_case = RequestPasswordResetUseCase(uow, notifier)
    return await use_case.execute(request.email)


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Password reset token from email")
    new_password: str = Field(..., description="New password (min 8 chars)")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Reset Password

    Consumes the reset token, replaces the password and revokes every session.

    Raises:
        - 400 Bad Request: Weak password
        - 401 Unauthorized: Unknown, used or expired token
    """
    use_case = ResetPasswordUseCase(uow)
    return await use_case.execute(request.token, request.new_password)
