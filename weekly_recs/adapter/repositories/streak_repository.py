from typing import Dict, Iterable, Optional
from uuid import UUID

from sqlmodel import select

from weekly_recs.adapter.repositories.base import SqlModelRepository
from weekly_recs.app.repositories.streak_repository import IStreakRepository
from weekly_recs.domain.entities import Streak


class StreakRepository(SqlModelRepository, IStreakRepository):
    """Streak repository implementation using SQLModel"""

    async def get_by_member_id(self, member_id: UUID) -> Optional[Streak]:
        """Get a member's streak"""
        stmt = select(Streak).where(Streak.member_id == member_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def map_by_member_ids(self, member_ids: Iterable[UUID]) -> Dict[UUID, Streak]:
        """Get streaks keyed by member ID"""
        ids = list(member_ids)
        if not ids:
            return {}
        stmt = select(Streak).where(Streak.member_id.in_(ids))
        result = await self.session.exec(stmt)
        return {streak.member_id: streak for streak in result.all()}

    async def create(self, streak: Streak) -> Streak:
        """Create a new streak"""
        return await self._save(streak)

    async def update(self, streak: Streak) -> Streak:
        """Update existing streak"""
        return await self._save(streak)
