"""
Send Reminders Use Case

Nudges members who have not submitted as the deadline approaches.
"""

import logging
from datetime import datetime
from typing import Optional

from weekly_recs.app.services.notifications import NotificationSender, deliver
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings

from .dtos import SendRemindersResponse

logger = logging.getLogger(__name__)


class SendRemindersUseCase:
    """
    Business Rules:
    - Needs an open cycle
    - Only within REMINDER_WINDOW_HOURS of the deadline, never after it
    - Only active members without a submission are reminded
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(
        self, now: Optional[datetime] = None
    ) -> Result[SendRemindersResponse]:
        now = to_naive_utc(now) if now else utcnow()

        async with self.uow:
            cycle = await self.uow.cycles.get_open()
            if cycle is None:
                return Return.err(
                    Error(ErrorCode.no_active_window, "There is no open cycle")
                )
            cycle_number = cycle.cycle_number

            seconds_left = (cycle.deadline - now).total_seconds()
            if seconds_left <= 0:
                return Return.err(
                    Error(
                        ErrorCode.conflict,
                        f"Deadline for cycle {cycle.cycle_number} has passed",
                    )
                )

            hours_left = int(seconds_left // 3600)
            if hours_left > self.settings.reminder_window_hours:
                logger.info(
                    f"Deadline too far away for reminders: hours_left={hours_left}"
                )
                return Return.err(
                    Error(
                        ErrorCode.conflict,
                        f"Too early for reminders ({hours_left} hours left)",
                    )
                )

            submissions = await self.uow.submissions.list_by_cycle(cycle.id)
            submitted = {submission.member_id for submission in submissions}
            members = await self.uow.members.list_active()
            pending = [member for member in members if member.id not in submitted]

            if pending:
                await deliver(
                    "reminder", self.notifier.send_reminder(pending, cycle, hours_left)
                )
            else:
                logger.info("All members have submitted, no reminders needed")

        logger.info(
            f"Reminders for cycle {cycle_number}: sent={len(pending)} "
            f"hours_left={hours_left}"
        )

        return Return.ok(
            SendRemindersResponse(
                cycle_number=cycle_number,
                hours_until_deadline=hours_left,
                reminders_sent=len(pending),
            )
        )
