"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import CycleStatus, InvitationStatus

# Export all entities
from .member import Member, normalize_email
from .cycle import Cycle
from .submission import Submission
from .streak import Streak
from .streak_update import StreakUpdate
from .invitation import Invitation

__all__ = [
    # Enums
    "CycleStatus",
    "InvitationStatus",
    # Entities
    "Member",
    "Cycle",
    "Submission",
    "Streak",
    "StreakUpdate",
    "Invitation",
    # Helpers
    "normalize_email",
]
