"""
Cleanup Old Data Use Case

Retention cleanup for compiled cycles and expired invitations.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.result import Result, Return
from weekly_recs.domain.settings import CycleSettings

from .dtos import CleanupResponse

logger = logging.getLogger(__name__)


class CleanupOldDataUseCase:
    """
    Business Rules:
    - Only compiled cycles are deleted (with their submissions)
    - Only expired invitations are deleted; pending and accepted ones stay
    - Cutoff is RETENTION_WEEKS before now
    """

    def __init__(self, uow: UnitOfWork, settings: CycleSettings):
        self.uow = uow
        self.settings = settings

    async def execute(self, now: Optional[datetime] = None) -> Result[CleanupResponse]:
        now = to_naive_utc(now) if now else utcnow()
        cutoff = now - timedelta(weeks=self.settings.retention_weeks)

        async with self.uow:
            deleted_cycles = await self.uow.cycles.delete_compiled_before(cutoff)
            deleted_invitations = await self.uow.invitations.delete_expired_before(cutoff)
            await self.uow.commit()

        logger.info(
            f"Cleanup completed: cutoff={cutoff.isoformat()} cycles={deleted_cycles} "
            f"invitations={deleted_invitations}"
        )

        return Return.ok(
            CleanupResponse(
                cutoff=cutoff,
                deleted_cycles=deleted_cycles,
                deleted_invitations=deleted_invitations,
            )
        )
