from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from weekly_recs.domain.entities import Submission


class ISubmissionRepository(ABC):
    """Submission repository interface - application layer"""

    @abstractmethod
    async def get_by_member_and_cycle(
        self, member_id: UUID, cycle_id: UUID
    ) -> Optional[Submission]:
        """Get a member's submission for a cycle"""
        pass

    @abstractmethod
    async def list_by_cycle(self, cycle_id: UUID) -> List[Submission]:
        """Get all submissions for a cycle"""
        pass

    @abstractmethod
    async def create(self, submission: Submission) -> Submission:
        """Create a new submission (raises DuplicateRecordError)"""
        pass
