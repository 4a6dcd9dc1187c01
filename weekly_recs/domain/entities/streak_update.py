"""
StreakUpdate Entity

Ledger of applied streak updates.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..cycle_calendar import utcnow


class StreakUpdate(SQLModel, table=True):
    """
    StreakUpdate entity - one row per (member, cycle) streak update.

    Business Rules:
    - Immutable
    - (member_id, cycle_number) is unique so a cycle is never counted twice
    - Lets an interrupted compilation resume with the members it missed
    """

    __tablename__ = "streak_updates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    member_id: UUID = Field(foreign_key="members.id", nullable=False)
    cycle_number: int = Field(nullable=False, index=True)

    submitted: bool = Field(default=False)
    resulting_streak: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("uq_streak_update_member_cycle", "member_id", "cycle_number", unique=True),
    )
