"""
Accept Invitation Use Case

Turns a pending invitation into a new, active member.
"""

import logging
from datetime import datetime
from typing import Optional

from weekly_recs.app.repositories.errors import DuplicateRecordError
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.app.use_cases.cycles.dtos import MemberSummary
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.entities import InvitationStatus, Member, Streak
from weekly_recs.domain.result import Error, ErrorCode, Result, Return

from .dtos import AcceptInvitationResponse, InviteeProfile

logger = logging.getLogger(__name__)


def _summary(member: Member) -> MemberSummary:
    return MemberSummary(
        id=str(member.id), email=member.email, display_name=member.display_name
    )


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - Unknown tokens are rejected (NOT_FOUND)
    - Only pending invitations can be accepted (ALREADY_PROCESSED)
    - Expired invitations are marked expired and rejected (EXPIRED)
    - If the invitee already joined, the invitation is marked accepted but no
      duplicate member is created (ALREADY_MEMBER)
    - The same holds when a concurrent accept creates the member first
    - New members are active immediately and start with a zero streak
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        token: str,
        profile: Optional[InviteeProfile] = None,
        now: Optional[datetime] = None,
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token
            profile: Optional name fields for the new member
            now: Current instant (defaults to the system clock)

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        now = to_naive_utc(now) if now else utcnow()
        profile = profile or InviteeProfile()

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error(ErrorCode.not_found, "Invalid or non-existent invitation token")
                )

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        ErrorCode.already_processed,
                        f"This invitation has already been {invitation.status.value}",
                    )
                )

            if invitation.expires_at <= now:
                invitation.status = InvitationStatus.expired
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                return Return.err(Error(ErrorCode.expired, "This invitation has expired"))

            existing = await self.uow.members.get_by_email(invitation.invitee_email)
            if existing is not None:
                invitation.status = InvitationStatus.accepted
                invitation.accepted_at = now
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                return Return.err(
                    Error(
                        ErrorCode.already_member,
                        f"{invitation.invitee_email} is already a member",
                    )
                )

            email = invitation.invitee_email
            member = Member(
                email=email,
                first_name=profile.first_name,
                last_name=profile.last_name,
                is_active=True,
                joined_at=now,
            )
            try:
                await self.uow.members.create(member)
            except DuplicateRecordError:
                await self.uow.rollback()
                invitation = await self.uow.invitations.get_by_token(token)
                if invitation is not None and invitation.status == InvitationStatus.pending:
                    invitation.status = InvitationStatus.accepted
                    invitation.accepted_at = now
                    await self.uow.invitations.update(invitation)
                    await self.uow.commit()
                return Return.err(
                    Error(
                        ErrorCode.already_member,
                        f"{email} is already a member",
                    )
                )

            await self.uow.streaks.create(Streak(member_id=member.id, updated_at=now))

            invitation.status = InvitationStatus.accepted
            invitation.accepted_at = now
            await self.uow.invitations.update(invitation)

            inviter = await self.uow.members.get_by_id(invitation.inviter_id)

            await self.uow.commit()

        logger.info(
            f"Invitation accepted: invitation={invitation.id} new_member={member.id}"
        )

        return Return.ok(
            AcceptInvitationResponse(
                member=_summary(member),
                inviter=_summary(inviter) if inviter is not None else None,
            )
        )
