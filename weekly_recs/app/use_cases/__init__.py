"""
Use Cases

Organized into domain folders:
- cycles/: Weekly window lifecycle and compilation
- invitations/: Invite eligibility and invitation lifecycle
"""

from .cycles import (
    AcceptSubmissionUseCase,
    CleanupOldDataUseCase,
    CloseCycleUseCase,
    ManualCompileUseCase,
    OpenCycleUseCase,
    SendRemindersUseCase,
)
from .invitations import (
    AcceptInvitationUseCase,
    CheckEligibilityUseCase,
    GetInvitationStatusUseCase,
    SendInvitationUseCase,
    SweepEligibilityUseCase,
    SweepExpiredInvitationsUseCase,
)

__all__ = [
    # Cycles
    "OpenCycleUseCase",
    "AcceptSubmissionUseCase",
    "CloseCycleUseCase",
    "ManualCompileUseCase",
    "SendRemindersUseCase",
    "CleanupOldDataUseCase",
    # Invitations
    "CheckEligibilityUseCase",
    "SendInvitationUseCase",
    "AcceptInvitationUseCase",
    "GetInvitationStatusUseCase",
    "SweepEligibilityUseCase",
    "SweepExpiredInvitationsUseCase",
]
