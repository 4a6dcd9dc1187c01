from typing import List, Optional
from uuid import UUID

from sqlmodel import select

from weekly_recs.adapter.repositories.base import SqlModelRepository
from weekly_recs.app.repositories.submission_repository import ISubmissionRepository
from weekly_recs.domain.entities import Submission


class SubmissionRepository(SqlModelRepository, ISubmissionRepository):
    """Submission repository implementation using SQLModel"""

    async def get_by_member_and_cycle(
        self, member_id: UUID, cycle_id: UUID
    ) -> Optional[Submission]:
        """Get a member's submission for a cycle"""
        stmt = select(Submission).where(
            Submission.member_id == member_id, Submission.cycle_id == cycle_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_cycle(self, cycle_id: UUID) -> List[Submission]:
        """Get all submissions for a cycle"""
        stmt = (
            select(Submission)
            .where(Submission.cycle_id == cycle_id)
            .order_by(Submission.submitted_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, submission: Submission) -> Submission:
        """Create a new submission"""
        return await self._save(submission)
