"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import User


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    email: str
    name: str
    role: str
    email_verified: bool
    tenant_id: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            role=user.role.value,
            email_verified=user.email_verified,
            tenant_id=str(user.tenant_id) if user.tenant_id else None,
        )


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserInfo
    token: str
    token_type: str = "bearer"
    expires_at: datetime


class TokenContext(BaseModel):
    """Resolved bearer token: who it belongs to and what it is for"""

    user: UserInfo
    purpose: str
    expires_at: datetime


class MessageResponse(BaseModel):
    """Uniform status/message response"""

    status: str
    message: str
