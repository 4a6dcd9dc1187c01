"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CycleStatus(str, Enum):
    """Cycle status (forward-only: open -> closed -> compiled)"""

    open = "open"
    closed = "closed"
    compiled = "compiled"


class InvitationStatus(str, Enum):
    """Invitation status (forward-only: pending -> accepted | expired)"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"
