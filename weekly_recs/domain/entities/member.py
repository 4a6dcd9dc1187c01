"""
Member Entity

A person taking part in the weekly cycle.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..cycle_calendar import utcnow


def normalize_email(email: str) -> str:
    return email.strip().lower()


class Member(SQLModel, table=True):
    """
    Member entity - a participant of the weekly cycle.

    Business Rules:
    - Email is lower-cased, trimmed and unique across all members
    - Only active members are prompted, tracked and allowed to submit
    - invitations_sent is a lifetime counter, never decremented
    """

    __tablename__ = "members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)

    is_active: bool = Field(default=True)
    invitations_sent: int = Field(default=0)

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_member_is_active", "is_active"),)

    @property
    def display_name(self) -> str:
        if self.first_name:
            return f"{self.first_name} {self.last_name}" if self.last_name else self.first_name
        return self.email
