from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from uuid import UUID

from weekly_recs.domain.entities import Streak


class IStreakRepository(ABC):
    """Streak repository interface - application layer"""

    @abstractmethod
    async def get_by_member_id(self, member_id: UUID) -> Optional[Streak]:
        """Get a member's streak"""
        pass

    @abstractmethod
    async def map_by_member_ids(self, member_ids: Iterable[UUID]) -> Dict[UUID, Streak]:
        """Get streaks keyed by member ID"""
        pass

    @abstractmethod
    async def create(self, streak: Streak) -> Streak:
        """Create a new streak"""
        pass

    @abstractmethod
    async def update(self, streak: Streak) -> Streak:
        """Update existing streak"""
        pass
