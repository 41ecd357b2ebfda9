from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel, Field

from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import TokenContext
from src.app.use_cases.reminders import (
    GetReminderStatisticsUseCase,
    GetReminderUseCase,
    ListAssessmentRemindersUseCase,
    ListRemindersUseCase,
    PassSummary,
    ReminderInfo,
    ReminderStatistics,
    RunScheduledPassUseCase,
    SendManualReminderUseCase,
)
from src.depends import get_notifier, get_tenant_user, get_unit_of_work

router = APIRouter(tags=["Reminders"])


class RunPassRequest(BaseModel):
    """Scheduler trigger payload"""

    now: Optional[datetime] = Field(
        None, description="Evaluate as of this instant (defaults to the current time)"
    )


def _as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@router.post("/reminders/run", status_code=status.HTTP_200_OK, response_model=PassSummary)
async def run_scheduled_pass(
    request: Optional[RunPassRequest] = Body(None),
    _: bool = Depends(verify_admin_api_key),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Run one reminder/expiration pass (admin API key).

    Normally triggered by cron.py; exposed for operators and testing.
    """
    now = _as_naive_utc(request.now) if request else None
    use_case = RunScheduledPassUseCase(uow, notifier)
    return await use_case.execute(now)


@router.post(
    "/invitations/{invitation_id}/reminders",
    status_code=status.HTTP_201_CREATED,
    response_model=ReminderInfo,
)
async def send_manual_reminder(
    invitation_id: UUID,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Send the next reminder now, outside the cadence.

    Raises:
        - 404 Not Found: Unknown invitation or another tenant's
        - 409 Conflict: Invitation completed/expired, or 3 reminders already sent
        - 502 Bad Gateway: Email could not be delivered (recorded as failed)
    """
    use_case = SendManualReminderUseCase(uow, notifier)
    return await use_case.execute(
        tenant_id=UUID(current_user.user.tenant_id),
        user_id=UUID(current_user.user.id),
        invitation_id=invitation_id,
    )


@router.get(
    "/invitations/{invitation_id}/reminders",
    status_code=status.HTTP_200_OK,
    response_model=List[ReminderInfo],
)
async def list_reminders(
    invitation_id: UUID,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListRemindersUseCase(uow)
    return await use_case.execute(UUID(current_user.user.tenant_id), invitation_id)


@router.get(
    "/assessments/{assessment_id}/reminders/statistics",
    status_code=status.HTTP_200_OK,
    response_model=ReminderStatistics,
)
async def reminder_statistics(
    assessment_id: UUID,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetReminderStatisticsUseCase(uow)
    return await use_case.execute(UUID(current_user.user.tenant_id), assessment_id)


@router.get(
    "/assessments/{assessment_id}/reminders",
    status_code=status.HTTP_200_OK,
    response_model=List[ReminderInfo],
)
async def list_assessment_reminders(
    assessment_id: UUID,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListAssessmentRemindersUseCase(uow)
    return await use_case.execute(UUID(current_user.user.tenant_id), assessment_id)


@router.get(
    "/reminders/{reminder_id}",
    status_code=status.HTTP_200_OK,
    response_model=ReminderInfo,
)
async def get_reminder(
    reminder_id: UUID,
    current_user: TokenContext = Depends(get_tenant_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reminder details

    Raises:
        - 404 Not Found: Unknown reminder or another tenant's
    """
    use_case = GetReminderUseCase(uow)
    return await use_case.execute(UUID(current_user.user.tenant_id), reminder_id)
