"""
Submission Entity

One member's recommendation for one cycle.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..cycle_calendar import utcnow


class Submission(SQLModel, table=True):
    """
    Submission entity - one recommendation per member per cycle.

    Business Rules:
    - (member_id, cycle_id) is unique; concurrent deliveries race on this index
    - Only created while the cycle is open
    - Never edited; removed only by retention cleanup
    """

    __tablename__ = "submissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    member_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)
    cycle_id: UUID = Field(foreign_key="cycles.id", nullable=False, index=True)

    recommendation: str = Field(max_length=500)
    reasons: str = Field(max_length=1000)
    message: str = Field(max_length=1000)

    # Timestamps
    submitted_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("uq_submission_member_cycle", "member_id", "cycle_id", unique=True),
    )
