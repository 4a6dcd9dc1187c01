"""
Invitation Use Cases

Eligibility checks and the invitation token lifecycle.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .check_eligibility_use_case import CheckEligibilityUseCase
from .dtos import (
    AcceptInvitationResponse,
    EligibilityResponse,
    InvitationStatusResponse,
    InviteeProfile,
    SendInvitationResponse,
    SweepEligibilityResponse,
    SweepExpiredInvitationsResponse,
)
from .get_invitation_status_use_case import GetInvitationStatusUseCase
from .send_invitation_use_case import SendInvitationUseCase
from .sweep_eligibility_use_case import SweepEligibilityUseCase
from .sweep_expired_invitations_use_case import SweepExpiredInvitationsUseCase

__all__ = [
    "CheckEligibilityUseCase",
    "SendInvitationUseCase",
    "AcceptInvitationUseCase",
    "GetInvitationStatusUseCase",
    "SweepEligibilityUseCase",
    "SweepExpiredInvitationsUseCase",
    "InviteeProfile",
    "EligibilityResponse",
    "SendInvitationResponse",
    "AcceptInvitationResponse",
    "InvitationStatusResponse",
    "SweepEligibilityResponse",
    "SweepExpiredInvitationsResponse",
]
