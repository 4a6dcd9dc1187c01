import logging
from datetime import datetime
from typing import Optional

from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.result import Result, Return

from .dtos import SweepExpiredInvitationsResponse

logger = logging.getLogger(__name__)


class SweepExpiredInvitationsUseCase:
    """Marks every pending invitation past its expiry as expired."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, now: Optional[datetime] = None
    ) -> Result[SweepExpiredInvitationsResponse]:
        now = to_naive_utc(now) if now else utcnow()

        async with self.uow:
            expired_count = await self.uow.invitations.expire_pending(now)
            await self.uow.commit()

        logger.info(f"Expired invitations swept: count={expired_count}")

        return Return.ok(SweepExpiredInvitationsResponse(expired_count=expired_count))
