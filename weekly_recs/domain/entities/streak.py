"""
Streak Entity

Consecutive-participation counter of a member.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..cycle_calendar import utcnow


class Streak(SQLModel, table=True):
    """
    Streak entity - consecutive cycles a member has submitted in.

    Business Rules:
    - One record per member, created on the first cycle close (or on joining)
    - current_streak <= longest_streak
    - can_invite is derived from is_invite_eligible() and written nowhere else
    - invite_eligible_since records the latest false -> true flip
    """

    __tablename__ = "streaks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    member_id: UUID = Field(foreign_key="members.id", unique=True, index=True)

    current_streak: int = Field(default=0)
    longest_streak: int = Field(default=0)
    last_cycle_number: Optional[int] = Field(default=None)

    can_invite: bool = Field(default=False)
    invite_eligible_since: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_streak_can_invite", "can_invite"),)
