"""
Streak Rules

Pure transitions for the consecutive-participation counter and the invite
eligibility predicate. Persistence and the once-per-cycle guard live in
StreakTracker.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .cycle_calendar import are_adjacent


class StreakState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: int = 0
    longest: int = 0
    last_cycle_number: Optional[int] = None


def advance_streak(
    state: Optional[StreakState], cycle_number: int, did_submit: bool
) -> StreakState:
    """
    Apply one cycle close to a streak.

    Not idempotent: applying the same cycle twice changes the result, so each
    (member, cycle) pair must be applied exactly once.
    """
    if state is None:
        current = 1 if did_submit else 0
        return StreakState(
            current=current,
            longest=current,
            last_cycle_number=cycle_number if did_submit else None,
        )

    if did_submit:
        if are_adjacent(state.last_cycle_number, cycle_number):
            current = state.current + 1
        else:
            current = 1
        last_cycle_number = cycle_number
    else:
        current = 0
        last_cycle_number = state.last_cycle_number

    return StreakState(
        current=current,
        longest=max(state.longest, current),
        last_cycle_number=last_cycle_number,
    )


def is_invite_eligible(
    current_streak: int, invites_used: int, threshold: int, cap: int
) -> bool:
    return current_streak >= threshold and invites_used < cap
