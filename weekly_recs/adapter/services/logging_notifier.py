"""
Logging Notification Sender

Message composition and delivery live outside this service. This sender
records each outbound message intent in the log so deployments without a
mail integration still show what would have been sent.
"""

import logging
from typing import List

from weekly_recs.app.services.notifications import NotificationSender
from weekly_recs.domain.entities import Cycle, Member, Submission

logger = logging.getLogger(__name__)


class LoggingNotificationSender(NotificationSender):
    async def send_window_open_notice(self, members: List[Member], cycle: Cycle) -> None:
        logger.info(
            f"[notify] window open: cycle={cycle.cycle_number} "
            f"deadline={cycle.deadline.isoformat()} recipients={len(members)}"
        )

    async def send_compilation_notice(
        self, members: List[Member], submissions: List[Submission], cycle: Cycle
    ) -> None:
        logger.info(
            f"[notify] compilation: cycle={cycle.cycle_number} "
            f"submissions={len(submissions)} recipients={len(members)}"
        )

    async def send_submission_ack(self, member: Member, submission: Submission) -> None:
        logger.info(f"[notify] submission ack: to={member.email} submission={submission.id}")

    async def send_invitation(
        self, inviter_display_name: str, invitee_email: str, token: str
    ) -> None:
        # token is not logged
        logger.info(f"[notify] invitation: to={invitee_email} from={inviter_display_name}")

    async def send_eligibility_granted(self, member: Member, streak_count: int) -> None:
        logger.info(f"[notify] eligibility granted: to={member.email} streak={streak_count}")

    async def send_reminder(
        self, members: List[Member], cycle: Cycle, hours_left: int
    ) -> None:
        logger.info(
            f"[notify] reminder: cycle={cycle.cycle_number} hours_left={hours_left} "
            f"recipients={len(members)}"
        )
