from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from weekly_recs.domain.entities import Member


class IMemberRepository(ABC):
    """Member repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: UUID) -> Optional[Member]:
        """Get member by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Member]:
        """Get member by normalized email address"""
        pass

    @abstractmethod
    async def list_active(self) -> List[Member]:
        """Get all active members"""
        pass

    @abstractmethod
    async def list_by_ids(self, member_ids: Iterable[UUID]) -> List[Member]:
        """Get members by IDs"""
        pass

    @abstractmethod
    async def create(self, member: Member) -> Member:
        """Create a new member (raises DuplicateRecordError on email clash)"""
        pass

    @abstractmethod
    async def update(self, member: Member) -> Member:
        """Update existing member"""
        pass
