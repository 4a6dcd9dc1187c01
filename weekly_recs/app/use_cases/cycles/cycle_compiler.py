"""
Cycle Compiler

Second half of closing a cycle: streak updates for every active member,
distribution to the submitters, then the closed -> compiled transition.
Shared by the scheduled close and the manual compile of a closed cycle.
"""

import logging
from typing import List, Tuple
from uuid import UUID

from weekly_recs.app.services.notifications import NotificationSender, deliver
from weekly_recs.app.services.streak_tracker import StreakTracker
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import utcnow
from weekly_recs.domain.entities import Cycle, CycleStatus, Member
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings

from .dtos import CompileCycleResponse

logger = logging.getLogger(__name__)


class CycleCompiler:
    """
    Business Rules:
    - The cycle must already be closed (committed) before compiling starts
    - Every active member gets exactly one streak update per cycle; members
      already in the ledger for this cycle are skipped
    - A failed member update leaves the cycle closed so it can be recompiled
    - The cycle is compiled even with zero submissions
    - Notifications go out after commit and never undo the transition
    - Eligibility grants from kept updates are announced even when the
      compile fails partway
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings
        self.tracker = StreakTracker(uow, settings)

    async def compile(self, cycle: Cycle) -> Result[CompileCycleResponse]:
        """Compile a closed cycle inside the caller's unit of work."""
        submissions = await self.uow.submissions.list_by_cycle(cycle.id)
        submitter_ids = {submission.member_id for submission in submissions}

        members = await self.uow.members.list_active()
        invite_counts = await self.uow.invitations.active_counts_by_inviter()
        already_updated = await self.uow.streak_updates.member_ids_for_cycle(
            cycle.cycle_number
        )

        granted: List[Tuple[Member, int]] = []
        failed: List[UUID] = []
        updated = 0

        for member in members:
            if member.id in already_updated:
                continue
            try:
                async with self.uow.savepoint():
                    result = await self.tracker.update(
                        member,
                        cycle.cycle_number,
                        member.id in submitter_ids,
                        invite_counts.get(member.id, 0),
                    )
            except Exception:
                logger.exception(
                    f"Streak update failed: member={member.id} cycle={cycle.cycle_number}"
                )
                failed.append(member.id)
                continue

            if result.is_err():
                logger.warning(f"Streak update skipped: {result.error.message}")
                continue

            updated += 1
            if result.value.eligibility_granted:
                granted.append((member, result.value.current_streak))

        if failed:
            await self.uow.commit()
            # Kept updates are not revisited on recompile
            await self._announce_grants(granted)
            return Return.err(
                Error(
                    ErrorCode.conflict,
                    f"Streak updates failed for {len(failed)} member(s); "
                    f"cycle {cycle.cycle_number} left closed for recompilation",
                )
            )

        await self.uow.commit()

        participants: List[Member] = []
        notified = False
        if submissions:
            participants = await self.uow.members.list_by_ids(submitter_ids)
            notified = await deliver(
                "compilation",
                self.notifier.send_compilation_notice(participants, submissions, cycle),
            )

        cycle.status = CycleStatus.compiled
        cycle.compiled_at = utcnow()
        await self.uow.cycles.update(cycle)
        await self.uow.commit()

        await self._announce_grants(granted)

        logger.info(
            f"Cycle {cycle.cycle_number} compiled: submissions={len(submissions)} "
            f"streaks_updated={updated} newly_eligible={len(granted)}"
        )

        return Return.ok(
            CompileCycleResponse(
                cycle_number=cycle.cycle_number,
                status=cycle.status.value,
                submission_count=len(submissions),
                participants_notified=len(participants) if notified else 0,
                streaks_updated=updated,
                newly_eligible=len(granted),
            )
        )

    async def _announce_grants(self, granted: List[Tuple[Member, int]]) -> None:
        for member, streak_count in granted:
            await deliver(
                "eligibility_granted",
                self.notifier.send_eligibility_granted(member, streak_count),
            )
