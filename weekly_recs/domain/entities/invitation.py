"""
Invitation Entity

Time-boxed invitations sent by eligible members.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..cycle_calendar import utcnow
from .enums import InvitationStatus


class Invitation(SQLModel, table=True):
    """
    Invitation entity - an eligible member's invitation to a new member.

    Business Rules:
    - Only sent by members meeting the streak threshold and under the cap
    - Expires after INVITE_EXPIRY_DAYS (default 7)
    - Token is single-use, cryptographically secure
    - At most one pending invitation per invitee email
    - Cannot invite existing members
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    inviter_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)
    invitee_email: str = Field(max_length=255, nullable=False, index=True)

    token: str = Field(unique=True, index=True, max_length=64)

    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    sent_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_status", "status"),
        Index(
            "uq_invitation_pending_email",
            "invitee_email",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
    )
