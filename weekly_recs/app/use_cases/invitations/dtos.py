"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from weekly_recs.app.services.eligibility_policy import EligibilityStatus
from weekly_recs.app.use_cases.cycles.dtos import MemberSummary


# ============================================================================
# Command DTOs
# ============================================================================


class InviteeProfile(BaseModel):
    """Profile fields supplied when accepting an invitation"""

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)


# ============================================================================
# Response DTOs
# ============================================================================


class EligibilityResponse(EligibilityStatus):
    """Response for check eligibility use case"""

    member_email: str


class SendInvitationResponse(BaseModel):
    """Response for send invitation use case"""

    invitation_id: str
    invitee_email: str
    status: str
    expires_at: datetime
    invites_remaining: int


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    member: MemberSummary
    inviter: Optional[MemberSummary] = None


class InvitationStatusResponse(BaseModel):
    """Response for get invitation status use case"""

    status: str
    invitee_email: str
    sent_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    is_expired: bool
    inviter_name: Optional[str] = None


class SweepEligibilityResponse(BaseModel):
    """Response for eligibility sweep use case"""

    total_members: int
    corrections: int
    newly_eligible: int
    failures: int


class SweepExpiredInvitationsResponse(BaseModel):
    """Response for expired invitation sweep use case"""

    expired_count: int
