from typing import Set
from uuid import UUID

from sqlmodel import select

from weekly_recs.adapter.repositories.base import SqlModelRepository
from weekly_recs.app.repositories.streak_update_repository import IStreakUpdateRepository
from weekly_recs.domain.entities import StreakUpdate


class StreakUpdateRepository(SqlModelRepository, IStreakUpdateRepository):
    """Streak ledger repository implementation using SQLModel"""

    async def exists(self, member_id: UUID, cycle_number: int) -> bool:
        """Whether the member's streak was already updated for the cycle"""
        stmt = select(StreakUpdate.id).where(
            StreakUpdate.member_id == member_id,
            StreakUpdate.cycle_number == cycle_number,
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def member_ids_for_cycle(self, cycle_number: int) -> Set[UUID]:
        """IDs of members already updated for the cycle"""
        stmt = select(StreakUpdate.member_id).where(
            StreakUpdate.cycle_number == cycle_number
        )
        result = await self.session.exec(stmt)
        return set(result.all())

    async def create(self, entry: StreakUpdate) -> StreakUpdate:
        """Record an update"""
        return await self._save(entry)
