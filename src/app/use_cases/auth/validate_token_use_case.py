"""
Validate Token Use Case

Guard used by every protected API handler.
"""

from typing import Optional

from src.app.services.tokens import resolve_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import TokenPurpose
from .dtos import TokenContext, UserInfo


class ValidateTokenUseCase:
    """
    Resolve a bearer token to its user and purpose.

    Errors:
        - TokenNotFoundError: unknown, revoked, consumed or wrong purpose
        - TokenExpiredError: past expires_at
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str, purpose: Optional[TokenPurpose] = None) -> TokenContext:
        async with self.uow:
            record, user = await resolve_token(self.uow, token, self.clock(), purpose=purpose)
            return TokenContext(
                user=UserInfo.from_entity(user),
                purpose=record.purpose.value,
                expires_at=record.expires_at,
            )
