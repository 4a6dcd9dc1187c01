from abc import ABC, abstractmethod
from typing import Set
from uuid import UUID

from weekly_recs.domain.entities import StreakUpdate


class IStreakUpdateRepository(ABC):
    """Streak ledger repository interface - application layer"""

    @abstractmethod
    async def exists(self, member_id: UUID, cycle_number: int) -> bool:
        """Whether the member's streak was already updated for the cycle"""
        pass

    @abstractmethod
    async def member_ids_for_cycle(self, cycle_number: int) -> Set[UUID]:
        """IDs of members already updated for the cycle"""
        pass

    @abstractmethod
    async def create(self, entry: StreakUpdate) -> StreakUpdate:
        """Record an update (raises DuplicateRecordError)"""
        pass
