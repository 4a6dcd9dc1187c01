"""
Streak Tracker

Applies one cycle close to one member's streak and recomputes the invite
eligibility flag. Driven only from the cycle compile step.
"""

import logging

from pydantic import BaseModel

from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import utcnow
from weekly_recs.domain.entities import Member, Streak, StreakUpdate
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings
from weekly_recs.domain.streaks import StreakState, advance_streak, is_invite_eligible

logger = logging.getLogger(__name__)


class StreakResult(BaseModel):
    member_id: str
    cycle_number: int
    submitted: bool
    current_streak: int
    longest_streak: int
    can_invite: bool
    eligibility_granted: bool


class StreakTracker:
    """
    Business Rules:
    - Exactly one update per (member, cycle); the ledger row rejects repeats
    - A missing record is created on the member's first cycle close
    - Consecutiveness is decided by are_adjacent(), never by subtraction
    - can_invite flips only through is_invite_eligible()
    """

    def __init__(self, uow: UnitOfWork, settings: CycleSettings):
        self.uow = uow
        self.settings = settings

    async def update(
        self, member: Member, cycle_number: int, did_submit: bool, invites_used: int
    ) -> Result[StreakResult]:
        """
        Update a member's streak inside the caller's transaction.

        Args:
            member: Member being updated
            cycle_number: Number of the cycle being closed
            did_submit: Whether the member submitted in that cycle
            invites_used: Member's pending + accepted invitations

        Returns:
            Result with StreakResult, or Error(ALREADY_PROCESSED)
        """
        if await self.uow.streak_updates.exists(member.id, cycle_number):
            return Return.err(
                Error(
                    ErrorCode.already_processed,
                    f"Streak for member {member.id} already updated for cycle {cycle_number}",
                )
            )

        streak = await self.uow.streaks.get_by_member_id(member.id)
        previous = None
        was_eligible = False
        if streak is not None:
            previous = StreakState(
                current=streak.current_streak,
                longest=streak.longest_streak,
                last_cycle_number=streak.last_cycle_number,
            )
            was_eligible = streak.can_invite

        state = advance_streak(previous, cycle_number, did_submit)
        can_invite = is_invite_eligible(
            state.current,
            invites_used,
            self.settings.streak_required_for_invite,
            self.settings.max_invites_per_member,
        )
        granted = can_invite and not was_eligible
        now = utcnow()

        if streak is None:
            streak = Streak(member_id=member.id)

        streak.current_streak = state.current
        streak.longest_streak = state.longest
        streak.last_cycle_number = state.last_cycle_number
        streak.can_invite = can_invite
        if granted:
            streak.invite_eligible_since = now
        streak.updated_at = now

        if previous is None:
            await self.uow.streaks.create(streak)
        else:
            await self.uow.streaks.update(streak)

        await self.uow.streak_updates.create(
            StreakUpdate(
                member_id=member.id,
                cycle_number=cycle_number,
                submitted=did_submit,
                resulting_streak=state.current,
            )
        )

        logger.debug(
            f"Streak updated: member={member.id} cycle={cycle_number} "
            f"submitted={did_submit} current={state.current} can_invite={can_invite}"
        )

        return Return.ok(
            StreakResult(
                member_id=str(member.id),
                cycle_number=cycle_number,
                submitted=did_submit,
                current_streak=state.current,
                longest_streak=state.longest,
                can_invite=can_invite,
                eligibility_granted=granted,
            )
        )
