"""
Deactivate User Use Case

Soft-deactivates an account; users are never hard-deleted.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, UserStatus
from src.domain.errors import InvalidStateError, UserNotFoundError
from src.app.use_cases.auth.dtos import UserInfo


class DeactivateUserUseCase:
    """
    Use case for deactivating a user.

    Business Rules:
    - Status becomes deactivated, the row is kept
    - Every live token of the user is revoked
    - Deactivating an already deactivated user is an InvalidStateError
    """

    def __init__(self, uow: UnitOfWork, clock=utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID) -> UserInfo:
        now = self.clock()
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError()
            if user.status == UserStatus.deactivated:
                raise InvalidStateError("User is already deactivated")

            user.status = UserStatus.deactivated
            await self.uow.users.update(user)

            revoked_count = await self.uow.auth_tokens.revoke_live_by_user_id(user.id, now)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=user.tenant_id,
                    user_id=user.id,
                    action="user_deactivated",
                    event_metadata={"tokens_revoked": revoked_count},
                )
            )

            await self.uow.commit()

            return UserInfo.from_entity(user)
