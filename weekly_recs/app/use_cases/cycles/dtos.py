"""
Cycle Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the weekly cycle domain.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Command DTOs
# ============================================================================


class SubmissionPayload(BaseModel):
    """Structured fields extracted from an inbound submission"""

    recommendation: str = Field(..., min_length=1, max_length=500)
    reasons: str = Field(..., min_length=1, max_length=1000)
    message: str = Field(..., min_length=1, max_length=1000)

    @field_validator("recommendation", "reasons", "message")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class MemberSummary(BaseModel):
    id: str
    email: str
    display_name: str


class OpenCycleResponse(BaseModel):
    """Response for open cycle use case"""

    cycle_id: str
    cycle_number: int
    opens_at: datetime
    deadline: datetime
    members: List[MemberSummary]


class SubmissionResponse(BaseModel):
    """Response for accept submission use case"""

    submission_id: str
    member_id: str
    cycle_number: int
    submitted_at: datetime


class CompileCycleResponse(BaseModel):
    """Response for close cycle and manual compile use cases"""

    cycle_number: int
    status: str
    submission_count: int
    participants_notified: int
    streaks_updated: int
    newly_eligible: int


class SendRemindersResponse(BaseModel):
    """Response for send reminders use case"""

    cycle_number: int
    hours_until_deadline: int
    reminders_sent: int


class CleanupResponse(BaseModel):
    """Response for retention cleanup use case"""

    cutoff: datetime
    deleted_cycles: int
    deleted_invitations: int
