"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .validate_token_use_case import ValidateTokenUseCase
from .logout_use_case import LogoutUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import AuthResponse, MessageResponse, TokenContext, UserInfo

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ValidateTokenUseCase",
    "LogoutUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # DTOs - Responses
    "AuthResponse",
    "MessageResponse",
    "TokenContext",
    # DTOs - Nested Models
    "UserInfo",
]
