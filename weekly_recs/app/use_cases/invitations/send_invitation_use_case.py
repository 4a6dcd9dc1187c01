"""
Send Invitation Use Case

Issues a time-boxed invitation on behalf of an eligible member.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from weekly_recs.app.repositories.errors import DuplicateRecordError
from weekly_recs.app.services.eligibility_policy import EligibilityPolicy
from weekly_recs.app.services.notifications import NotificationSender, deliver
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.entities import Invitation, InvitationStatus, normalize_email
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings

from .dtos import SendInvitationResponse

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


class SendInvitationUseCase:
    """
    Use case for sending an invitation.

    Business Rules:
    - Eligibility is re-evaluated here; a previous check is not trusted
    - Invitee email is normalized and must be a valid address
    - Existing members cannot be invited
    - One pending, unexpired invitation per invitee email
    - Token is cryptographically secure and single-use
    - Expires INVITE_EXPIRY_DAYS after sending
    - Inviter's lifetime counter is incremented
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(
        self, inviter_email: str, invitee_email: str, now: Optional[datetime] = None
    ) -> Result[SendInvitationResponse]:
        """
        Execute send invitation use case.

        Args:
            inviter_email: Email of the member sending the invitation
            invitee_email: Email address to invite
            now: Current instant (defaults to the system clock)

        Returns:
            Result with SendInvitationResponse DTO, or Error
        """
        now = to_naive_utc(now) if now else utcnow()

        try:
            email = normalize_email(_email_adapter.validate_python(invitee_email.strip()))
        except ValidationError:
            return Return.err(
                Error(ErrorCode.validation_error, f"Invalid email address: {invitee_email}")
            )

        async with self.uow:
            inviter = await self.uow.members.get_by_email(normalize_email(inviter_email))
            eligibility = await EligibilityPolicy(self.uow, self.settings).evaluate(inviter)
            if not eligibility.eligible:
                return Return.err(Error(ErrorCode.validation_error, eligibility.reason))

            if await self.uow.members.get_by_email(email) is not None:
                return Return.err(
                    Error(ErrorCode.already_member, f"{email} is already a member")
                )

            # Stale pending rows would otherwise hold the pending-email index
            await self.uow.invitations.expire_pending(now, email=email)

            if await self.uow.invitations.get_pending_by_email(email, now) is not None:
                return Return.err(
                    Error(
                        ErrorCode.duplicate_pending_invite,
                        f"A pending invitation already exists for {email}",
                    )
                )

            invitation = Invitation(
                inviter_id=inviter.id,
                invitee_email=email,
                token=secrets.token_urlsafe(32),
                status=InvitationStatus.pending,
                sent_at=now,
                expires_at=now + timedelta(days=self.settings.invite_expiry_days),
            )
            try:
                await self.uow.invitations.create(invitation)
            except DuplicateRecordError:
                return Return.err(
                    Error(
                        ErrorCode.duplicate_pending_invite,
                        f"A pending invitation already exists for {email}",
                    )
                )

            inviter.invitations_sent += 1
            await self.uow.members.update(inviter)

            await self.uow.commit()

        logger.info(
            f"Invitation sent: inviter={inviter.id} invitee={email} "
            f"expires_at={invitation.expires_at.isoformat()}"
        )

        await deliver(
            "invitation",
            self.notifier.send_invitation(inviter.display_name, email, invitation.token),
        )

        return Return.ok(
            SendInvitationResponse(
                invitation_id=str(invitation.id),
                invitee_email=email,
                status=invitation.status.value,
                expires_at=invitation.expires_at,
                invites_remaining=eligibility.invites_remaining - 1,
            )
        )
