"""
Accept Submission Use Case

Stores a member's recommendation for the open cycle.
"""

import logging

from weekly_recs.app.repositories.errors import DuplicateRecordError
from weekly_recs.app.services.notifications import NotificationSender, deliver
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.entities import Submission, normalize_email
from weekly_recs.domain.result import Error, ErrorCode, Result, Return

from .dtos import SubmissionPayload, SubmissionResponse

logger = logging.getLogger(__name__)


class AcceptSubmissionUseCase:
    """
    Use case for accepting a submission from an inbound message.

    Business Rules:
    - Sender must be an active member
    - A cycle must be open
    - One submission per member per cycle; the storage unique index is the
      authoritative guard, the lookup only gives a friendlier error first
    - Acknowledgement is sent after commit
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationSender):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, sender_email: str, payload: SubmissionPayload
    ) -> Result[SubmissionResponse]:
        """
        Execute accept submission use case.

        Args:
            sender_email: Address the submission came from
            payload: Already-extracted submission fields

        Returns:
            Result with SubmissionResponse DTO, or Error
        """
        email = normalize_email(sender_email)

        async with self.uow:
            member = await self.uow.members.get_by_email(email)
            if member is None or not member.is_active:
                logger.warning(f"Submission from unknown or inactive sender: {email}")
                return Return.err(
                    Error(ErrorCode.not_found, f"No active member with email {email}")
                )

            cycle = await self.uow.cycles.get_open()
            if cycle is None:
                return Return.err(
                    Error(
                        ErrorCode.no_active_window,
                        "There is no open cycle accepting submissions",
                    )
                )

            existing = await self.uow.submissions.get_by_member_and_cycle(
                member.id, cycle.id
            )
            if existing is not None:
                return Return.err(
                    Error(
                        ErrorCode.duplicate_submission,
                        f"Already submitted for cycle {cycle.cycle_number}",
                    )
                )

            submission = Submission(
                member_id=member.id,
                cycle_id=cycle.id,
                recommendation=payload.recommendation,
                reasons=payload.reasons,
                message=payload.message,
            )
            try:
                await self.uow.submissions.create(submission)
            except DuplicateRecordError:
                logger.info(
                    f"Concurrent duplicate submission rejected: member={member.id} "
                    f"cycle={cycle.cycle_number}"
                )
                return Return.err(
                    Error(
                        ErrorCode.duplicate_submission,
                        f"Already submitted for cycle {cycle.cycle_number}",
                    )
                )

            await self.uow.commit()

        logger.info(
            f"Submission accepted: member={member.id} cycle={cycle.cycle_number} "
            f"submission={submission.id}"
        )

        await deliver("submission_ack", self.notifier.send_submission_ack(member, submission))

        return Return.ok(
            SubmissionResponse(
                submission_id=str(submission.id),
                member_id=str(member.id),
                cycle_number=cycle.cycle_number,
                submitted_at=submission.submitted_at,
            )
        )
