from typing import Optional

from pydantic import BaseModel

from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.entities import Member
from weekly_recs.domain.settings import CycleSettings


class EligibilityStatus(BaseModel):
    """Outcome of an invite eligibility check"""

    eligible: bool
    reason: Optional[str] = None
    current_streak: int = 0
    invites_used: int = 0
    invites_remaining: int = 0


class EligibilityPolicy:
    """
    Evaluates invite eligibility from live state, failing closed.

    Checks in order: member active, streak record present, streak at or above
    the threshold, pending + accepted invitations below the cap.
    """

    def __init__(self, uow: UnitOfWork, settings: CycleSettings):
        self.uow = uow
        self.settings = settings

    async def evaluate(self, member: Optional[Member]) -> EligibilityStatus:
        threshold = self.settings.streak_required_for_invite
        cap = self.settings.max_invites_per_member

        if member is None or not member.is_active:
            return EligibilityStatus(eligible=False, reason="Member not found or inactive")

        streak = await self.uow.streaks.get_by_member_id(member.id)
        if streak is None:
            return EligibilityStatus(eligible=False, reason="No submission history")

        if streak.current_streak < threshold:
            return EligibilityStatus(
                eligible=False,
                reason=(
                    f"Requires {threshold} consecutive weeks "
                    f"(current: {streak.current_streak})"
                ),
                current_streak=streak.current_streak,
            )

        invites_used = await self.uow.invitations.count_active_by_inviter(member.id)
        if invites_used >= cap:
            return EligibilityStatus(
                eligible=False,
                reason=f"Maximum {cap} invites per member reached",
                current_streak=streak.current_streak,
                invites_used=invites_used,
            )

        return EligibilityStatus(
            eligible=True,
            current_streak=streak.current_streak,
            invites_used=invites_used,
            invites_remaining=cap - invites_used,
        )
