"""
Admin API Routes - Cycle Triggers and Sweeps

Entry points for the scheduler and operators. Every failure kind comes back as
a structured error body rather than an unhandled fault.
Authentication is via Admin API Key.
"""

from fastapi import APIRouter, Depends, status

from weekly_recs.api.error import raise_for_error
from weekly_recs.api.utils.admin_auth import verify_admin_api_key
from weekly_recs.app.services.notifications import NotificationSender
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.app.use_cases.cycles import (
    CleanupOldDataUseCase,
    CleanupResponse,
    CloseCycleUseCase,
    CompileCycleResponse,
    ManualCompileUseCase,
    OpenCycleResponse,
    OpenCycleUseCase,
    SendRemindersResponse,
    SendRemindersUseCase,
)
from weekly_recs.app.use_cases.invitations import (
    SweepEligibilityResponse,
    SweepEligibilityUseCase,
    SweepExpiredInvitationsResponse,
    SweepExpiredInvitationsUseCase,
)
from weekly_recs.depends import get_notifier, get_settings, get_unit_of_work
from weekly_recs.domain.settings import CycleSettings

router = APIRouter(
    prefix="/admin", tags=["Admin"], dependencies=[Depends(verify_admin_api_key)]
)


@router.post(
    "/cycles/open",
    status_code=status.HTTP_201_CREATED,
    response_model=OpenCycleResponse,
)
async def open_cycle(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """
    Open Cycle

    Opens this week's submission window and prompts all active members.

    Raises:
        - 409 Conflict: CONFLICT (a cycle is open or awaiting compilation)
    """
    result = await OpenCycleUseCase(uow, notifier, settings).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/cycles/close",
    status_code=status.HTTP_200_OK,
    response_model=CompileCycleResponse,
)
async def close_cycle(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """
    Close Cycle

    Closes the open window, updates every member's streak and compiles it.

    Raises:
        - 409 Conflict: NO_ACTIVE_WINDOW, CONFLICT (streak updates failed)
    """
    result = await CloseCycleUseCase(uow, notifier, settings).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/cycles/compile",
    status_code=status.HTTP_200_OK,
    response_model=CompileCycleResponse,
)
async def compile_open_cycle(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """
    Manual Compile (current cycle)

    Same as the scheduled close, triggered by an operator.

    Raises:
        - 409 Conflict: NO_ACTIVE_WINDOW, CONFLICT
    """
    result = await ManualCompileUseCase(uow, notifier, settings).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/cycles/{cycle_number}/compile",
    status_code=status.HTTP_200_OK,
    response_model=CompileCycleResponse,
)
async def compile_cycle(
    cycle_number: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """
    Manual Compile

    Compiles a closed cycle out of band (e.g. after an interrupted close).

    Raises:
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: ALREADY_COMPILED, CONFLICT (cycle still open)
    """
    result = await ManualCompileUseCase(uow, notifier, settings).execute(cycle_number)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/cycles/remind",
    status_code=status.HTTP_200_OK,
    response_model=SendRemindersResponse,
)
async def send_reminders(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """
    Send Reminders

    Reminds members who have not submitted, close to the deadline.

    Raises:
        - 409 Conflict: NO_ACTIVE_WINDOW, CONFLICT (too early or past deadline)
    """
    result = await SendRemindersUseCase(uow, notifier, settings).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/eligibility/sweep",
    status_code=status.HTTP_200_OK,
    response_model=SweepEligibilityResponse,
)
async def sweep_eligibility(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """Recompute every member's invite eligibility flag"""
    result = await SweepEligibilityUseCase(uow, notifier, settings).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/invitations/sweep-expired",
    status_code=status.HTTP_200_OK,
    response_model=SweepExpiredInvitationsResponse,
)
async def sweep_expired_invitations(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Mark pending invitations past expiry as expired"""
    result = await SweepExpiredInvitationsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/cleanup",
    status_code=status.HTTP_200_OK,
    response_model=CleanupResponse,
)
async def cleanup(
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: CycleSettings = Depends(get_settings),
):
    """Delete compiled cycles and expired invitations past the retention window"""
    result = await CleanupOldDataUseCase(uow, settings).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value
