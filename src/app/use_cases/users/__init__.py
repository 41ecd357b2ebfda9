"""
User Management Use Cases

All user-related business logic.
"""

from .change_role_use_case import ChangeRoleUseCase
from .deactivate_user_use_case import DeactivateUserUseCase

__all__ = [
    "ChangeRoleUseCase",
    "DeactivateUserUseCase",
]
