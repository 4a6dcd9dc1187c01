"""
Sweep Eligibility Use Case

Daily reconciliation of every member's invite eligibility flag.
"""

import logging
from typing import List, Tuple

from weekly_recs.app.services.notifications import NotificationSender, deliver
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import utcnow
from weekly_recs.domain.entities import Member
from weekly_recs.domain.result import Result, Return
from weekly_recs.domain.settings import CycleSettings
from weekly_recs.domain.streaks import is_invite_eligible

from .dtos import SweepEligibilityResponse

logger = logging.getLogger(__name__)


class SweepEligibilityUseCase:
    """
    Business Rules:
    - Recomputes can_invite for every active member that has a streak
    - Only drifted flags are written
    - false -> true flips stamp invite_eligible_since and notify the member
    - Each member runs in its own savepoint; a failure is logged and skipped
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(self) -> Result[SweepEligibilityResponse]:
        granted: List[Tuple[Member, int]] = []
        corrections = 0
        failures = 0

        async with self.uow:
            members = await self.uow.members.list_active()
            streaks = await self.uow.streaks.map_by_member_ids(
                [member.id for member in members]
            )
            invite_counts = await self.uow.invitations.active_counts_by_inviter()

            for member in members:
                streak = streaks.get(member.id)
                if streak is None:
                    continue

                should_invite = is_invite_eligible(
                    streak.current_streak,
                    invite_counts.get(member.id, 0),
                    self.settings.streak_required_for_invite,
                    self.settings.max_invites_per_member,
                )
                if should_invite == streak.can_invite:
                    continue

                flipped_on = should_invite and not streak.can_invite
                try:
                    async with self.uow.savepoint():
                        streak.can_invite = should_invite
                        if flipped_on:
                            streak.invite_eligible_since = utcnow()
                        await self.uow.streaks.update(streak)
                except Exception:
                    logger.exception(f"Eligibility sweep failed for member {member.id}")
                    failures += 1
                    continue

                corrections += 1
                if flipped_on:
                    granted.append((member, streak.current_streak))

            await self.uow.commit()

        for member, streak_count in granted:
            await deliver(
                "eligibility_granted",
                self.notifier.send_eligibility_granted(member, streak_count),
            )

        logger.info(
            f"Eligibility sweep: members={len(members)} corrections={corrections} "
            f"newly_eligible={len(granted)} failures={failures}"
        )

        return Return.ok(
            SweepEligibilityResponse(
                total_members=len(members),
                corrections=corrections,
                newly_eligible=len(granted),
                failures=failures,
            )
        )
