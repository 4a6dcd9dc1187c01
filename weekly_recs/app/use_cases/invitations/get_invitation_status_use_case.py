"""
Get Invitation Status Use Case

Looks up a token and reports its effective status.
"""

from datetime import datetime
from typing import Optional

from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.entities import InvitationStatus
from weekly_recs.domain.result import Error, ErrorCode, Result, Return

from .dtos import InvitationStatusResponse


class GetInvitationStatusUseCase:
    """
    Use case for reading an invitation by token.

    Business Rules:
    - Unknown tokens are rejected (NOT_FOUND)
    - A pending invitation past its expiry reads as expired even before the
      expiry sweep has run; nothing is written
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: str, now: Optional[datetime] = None
    ) -> Result[InvitationStatusResponse]:
        now = to_naive_utc(now) if now else utcnow()

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(Error(ErrorCode.not_found, "Invitation not found"))

            inviter = await self.uow.members.get_by_id(invitation.inviter_id)

            is_expired = invitation.expires_at <= now
            status = invitation.status
            if is_expired and status == InvitationStatus.pending:
                status = InvitationStatus.expired

            return Return.ok(
                InvitationStatusResponse(
                    status=status.value,
                    invitee_email=invitation.invitee_email,
                    sent_at=invitation.sent_at,
                    expires_at=invitation.expires_at,
                    accepted_at=invitation.accepted_at,
                    is_expired=is_expired,
                    inviter_name=inviter.display_name if inviter is not None else None,
                )
            )
