"""
Change Role Use Case

Switches a user between the platform roles.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, UserRole
from src.domain.errors import UserNotFoundError, ValidationError
from src.app.use_cases.auth.dtos import UserInfo


class ChangeRoleUseCase:
    """
    Use case for changing a user's role.

    Business Rules:
    - Role must be one of: user, admin
    - Changing to the current role is a no-op
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, role: str) -> UserInfo:
        try:
            new_role = UserRole(role)
        except ValueError:
            raise ValidationError(
                f"Invalid role: {role}. Must be one of: user, admin", code="INVALID_ROLE"
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError()

            if user.role == new_role:
                return UserInfo.from_entity(user)

            old_role = user.role
            user.role = new_role
            await self.uow.users.update(user)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=user.tenant_id,
                    user_id=user.id,
                    action="role_changed",
                    event_metadata={"old_role": old_role.value, "new_role": new_role.value},
                )
            )

            await self.uow.commit()

            return UserInfo.from_entity(user)
