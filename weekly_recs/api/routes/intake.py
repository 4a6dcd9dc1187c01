"""
Intake API Routes

Called by the inbound message parser with already-extracted fields.
Authentication is via Admin API Key.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from weekly_recs.api.error import raise_for_error
from weekly_recs.api.utils.admin_auth import verify_admin_api_key
from weekly_recs.app.services.notifications import NotificationSender
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.app.use_cases.cycles import (
    AcceptSubmissionUseCase,
    SubmissionPayload,
    SubmissionResponse,
)
from weekly_recs.app.use_cases.invitations import (
    SendInvitationResponse,
    SendInvitationUseCase,
)
from weekly_recs.depends import get_notifier, get_settings, get_unit_of_work
from weekly_recs.domain.settings import CycleSettings

router = APIRouter(
    prefix="/intake", tags=["Intake"], dependencies=[Depends(verify_admin_api_key)]
)


class SubmissionRequest(BaseModel):
    """Parsed submission handed over by the inbound parser"""

    sender_email: str = Field(..., min_length=3, max_length=255)
    submission: SubmissionPayload


class InviteCommandRequest(BaseModel):
    """Parsed invite command handed over by the inbound parser"""

    sender_email: str = Field(..., min_length=3, max_length=255)
    invitee_email: str = Field(..., min_length=3, max_length=255)


@router.post(
    "/submissions",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmissionResponse,
)
async def submit(
    request: SubmissionRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
):
    """
    Accept Submission

    Raises:
        - 404 Not Found: NOT_FOUND (unknown or inactive sender)
        - 409 Conflict: NO_ACTIVE_WINDOW, DUPLICATE_SUBMISSION
    """
    result = await AcceptSubmissionUseCase(uow, notifier).execute(
        request.sender_email, request.submission
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=SendInvitationResponse,
)
async def invite(
    request: InviteCommandRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notifier),
    settings: CycleSettings = Depends(get_settings),
):
    """
    Send Invitation

    Raises:
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_PENDING_INVITE
        - 422 Unprocessable Entity: VALIDATION_ERROR (ineligible, bad email)
    """
    result = await SendInvitationUseCase(uow, notifier, settings).execute(
        request.sender_email, request.invitee_email
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
