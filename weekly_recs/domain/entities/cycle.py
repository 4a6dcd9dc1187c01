"""
Cycle Entity

One weekly submission window.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..cycle_calendar import utcnow
from .enums import CycleStatus


class Cycle(SQLModel, table=True):
    """
    Cycle entity - one weekly submission window.

    Business Rules:
    - cycle_number is iso_year * 100 + iso_week, unique
    - Status moves forward only: open -> closed -> compiled
    - At most one cycle is open (partial unique index below)
    - Compiled even when nobody submitted
    """

    __tablename__ = "cycles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    cycle_number: int = Field(unique=True, index=True)

    status: CycleStatus = Field(default=CycleStatus.open)

    opens_at: datetime = Field(sa_column=Column(DateTime))
    deadline: datetime = Field(sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    closed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    compiled_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "uq_cycle_single_open",
            "status",
            unique=True,
            sqlite_where=text("status = 'open'"),
            postgresql_where=text("status = 'open'"),
        ),
        Index("idx_cycle_created_at", "created_at"),
    )
