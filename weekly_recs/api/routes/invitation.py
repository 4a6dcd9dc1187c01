from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from weekly_recs.api.error import raise_for_error
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CheckEligibilityUseCase,
    EligibilityResponse,
    GetInvitationStatusUseCase,
    InvitationStatusResponse,
    InviteeProfile,
)
from weekly_recs.depends import get_settings, get_unit_of_work
from weekly_recs.domain.settings import CycleSettings

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class AcceptInvitationRequest(BaseModel):
    """
    Accept invitation HTTP request payload

    Validates incoming request for accepting an invitation.
    """

    token: str = Field(..., min_length=1, description="Invitation token")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


@router.get(
    "/eligibility",
    status_code=status.HTTP_200_OK,
    response_model=EligibilityResponse,
)
async def check_eligibility(
    email: str = Query(..., min_length=3),
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: CycleSettings = Depends(get_settings),
):
    """Whether the member may invite right now, with the reason if not"""
    result = await CheckEligibilityUseCase(uow, settings).execute(email)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    request: AcceptInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Creates the invitee's membership from a pending invitation token.

    Raises:
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: ALREADY_PROCESSED, ALREADY_MEMBER
        - 410 Gone: EXPIRED
    """
    profile = InviteeProfile(first_name=request.first_name, last_name=request.last_name)
    result = await AcceptInvitationUseCase(uow).execute(request.token, profile)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/status/{token}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def get_invitation_status(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Invitation Status

    Effective status of a token; a lapsed pending invitation reads as expired.

    Raises:
        - 404 Not Found: NOT_FOUND
    """
    result = await GetInvitationStatusUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
