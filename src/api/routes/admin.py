from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UserInfo
from src.app.use_cases.users import ChangeRoleUseCase, DeactivateUserUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/users/{user_id}/deactivate", status_code=status.HTTP_200_OK, response_model=UserInfo
)
async def deactivate_user(
    user_id: UUID,
    _: bool = Depends(verify_admin_api_key),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate a user (admin API key).

    Every live token of the user is revoked; later logins fail with
    INVALID_CREDENTIALS.

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: Unknown user
        - 409 Conflict: User already deactivated
    """
    use_case = DeactivateUserUseCase(uow)
    return await use_case.execute(user_id)


class ChangeRoleRequest(BaseModel):
    role: str = Field(..., description="user or admin")


@router.put("/users/{user_id}/role", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def change_role(
    user_id: UUID,
    request: ChangeRoleRequest,
    _: bool = Depends(verify_admin_api_key),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a user's role (admin API key).

    Raises:
        - 400 Bad Request: Unknown role
        - 404 Not Found: Unknown user
    """
    use_case = ChangeRoleUseCase(uow)
    return await use_case.execute(user_id, request.role)
