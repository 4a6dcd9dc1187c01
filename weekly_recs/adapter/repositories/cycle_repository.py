from datetime import datetime
from typing import List, Optional

from sqlmodel import delete, select

from weekly_recs.adapter.repositories.base import SqlModelRepository
from weekly_recs.app.repositories.cycle_repository import ICycleRepository
from weekly_recs.domain.entities import Cycle, CycleStatus, Submission


class CycleRepository(SqlModelRepository, ICycleRepository):
    """Cycle repository implementation using SQLModel"""

    async def get_open(self) -> Optional[Cycle]:
        """Get the single open cycle, if any"""
        stmt = select(Cycle).where(Cycle.status == CycleStatus.open)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_number(self, cycle_number: int) -> Optional[Cycle]:
        """Get cycle by its year/week number"""
        stmt = select(Cycle).where(Cycle.cycle_number == cycle_number)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_status(self, status: CycleStatus) -> List[Cycle]:
        """Get all cycles with the given status"""
        stmt = select(Cycle).where(Cycle.status == status).order_by(Cycle.cycle_number)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, cycle: Cycle) -> Cycle:
        """Create a new cycle"""
        return await self._save(cycle)

    async def update(self, cycle: Cycle) -> Cycle:
        """Update existing cycle"""
        return await self._save(cycle)

    async def delete_compiled_before(self, cutoff: datetime) -> int:
        """Delete compiled cycles created before cutoff, with their submissions"""
        stmt = select(Cycle.id).where(
            Cycle.status == CycleStatus.compiled, Cycle.created_at < cutoff
        )
        result = await self.session.exec(stmt)
        cycle_ids = list(result.all())
        if not cycle_ids:
            return 0

        await self.session.execute(
            delete(Submission).where(Submission.cycle_id.in_(cycle_ids))
        )
        deleted = await self.session.execute(delete(Cycle).where(Cycle.id.in_(cycle_ids)))
        await self.session.flush()
        return deleted.rowcount
