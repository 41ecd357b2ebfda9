from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import AuthToken, TokenPurpose


class IAuthTokenRepository(ABC):
    """AuthToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: AuthToken) -> AuthToken:
        """Create a new token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[AuthToken]:
        """Get token by the SHA-256 hash of its bearer value"""
        pass

    @abstractmethod
    async def update(self, token: AuthToken) -> AuthToken:
        """Update existing token"""
        pass

    @abstractmethod
    async def consume(self, token_id: UUID, consumed_at: datetime) -> bool:
        """
        Mark a live token consumed in one conditional write.
        False if it was already consumed or revoked, so a token works once.
        """
        pass

    @abstractmethod
    async def revoke_live_by_user_id(
        self, user_id: UUID, revoked_at: datetime, purpose: Optional[TokenPurpose] = None
    ) -> int:
        """Revoke every live token of a user, optionally of one purpose. Returns count."""
        pass
