from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from weekly_recs.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_email(self, email: str, now: datetime) -> Optional[Invitation]:
        """Get the unexpired pending invitation for an invitee email"""
        pass

    @abstractmethod
    async def count_active_by_inviter(self, inviter_id: UUID) -> int:
        """Count an inviter's pending and accepted invitations"""
        pass

    @abstractmethod
    async def active_counts_by_inviter(self) -> Dict[UUID, int]:
        """Pending and accepted invitation counts keyed by inviter ID"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation (raises DuplicateRecordError)"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def expire_pending(self, now: datetime, email: Optional[str] = None) -> int:
        """Mark pending invitations past expiry as expired, optionally for one email"""
        pass

    @abstractmethod
    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete expired invitations whose expiry is older than cutoff"""
        pass
