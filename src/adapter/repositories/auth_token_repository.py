from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.auth_token_repository import IAuthTokenRepository
from src.domain.entities import AuthToken, TokenPurpose


class AuthTokenRepository(IAuthTokenRepository):
    """AuthToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: AuthToken) -> AuthToken:
        """Create a new token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[AuthToken]:
        """Get token by the SHA-256 hash of its bearer value"""
        stmt = select(AuthToken).where(AuthToken.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, token: AuthToken) -> AuthToken:
        """Update existing token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def consume(self, token_id: UUID, consumed_at: datetime) -> bool:
        """Set consumed_at unless another transaction consumed or revoked it first"""
        stmt = (
            update(AuthToken)
            .where(
                AuthToken.id == token_id,
                AuthToken.consumed_at.is_(None),
                AuthToken.revoked_at.is_(None),
            )
            .values(consumed_at=consumed_at)
        )
        connection = await self.session.connection()
        result = await connection.execute(stmt)
        return result.rowcount == 1

    async def revoke_live_by_user_id(
        self, user_id: UUID, revoked_at: datetime, purpose: Optional[TokenPurpose] = None
    ) -> int:
        """Revoke every live token of a user, optionally of one purpose"""
        stmt = select(AuthToken).where(
            AuthToken.user_id == user_id,
            AuthToken.consumed_at.is_(None),
            AuthToken.revoked_at.is_(None),
        )
        if purpose is not None:
            stmt = stmt.where(AuthToken.purpose == purpose)

        result = await self.session.exec(stmt)
        tokens = list(result.all())
        for token in tokens:
            token.revoked_at = revoked_at
            self.session.add(token)

        await self.session.flush()
        return len(tokens)
