"""
Admin API Key Authentication

Validates admin API keys for system administration endpoints.
"""

import hmac

from fastapi import Header, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.domain.errors import DomainError


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Used by the scheduler trigger and user administration endpoints.
    Different from user bearer authentication - this is operator auth.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            DomainError("Admin API key required", code="UNAUTHORIZED"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not hmac.compare_digest(x_admin_api_key, ApplicationConfig.ADMIN_API_KEY):
        raise ClientError(
            DomainError("Invalid admin API key", code="INVALID_API_KEY"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
