from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from weekly_recs.domain.entities import Cycle, CycleStatus


class ICycleRepository(ABC):
    """Cycle repository interface - application layer"""

    @abstractmethod
    async def get_open(self) -> Optional[Cycle]:
        """Get the single open cycle, if any"""
        pass

    @abstractmethod
    async def get_by_number(self, cycle_number: int) -> Optional[Cycle]:
        """Get cycle by its year/week number"""
        pass

    @abstractmethod
    async def list_by_status(self, status: CycleStatus) -> List[Cycle]:
        """Get all cycles with the given status"""
        pass

    @abstractmethod
    async def create(self, cycle: Cycle) -> Cycle:
        """Create a new cycle (raises DuplicateRecordError)"""
        pass

    @abstractmethod
    async def update(self, cycle: Cycle) -> Cycle:
        """Update existing cycle"""
        pass

    @abstractmethod
    async def delete_compiled_before(self, cutoff: datetime) -> int:
        """Delete compiled cycles created before cutoff, with their submissions"""
        pass
