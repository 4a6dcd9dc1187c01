"""
Close Cycle Use Case

Ends the open window and compiles it.
"""

import logging
from datetime import datetime
from typing import Optional

from weekly_recs.app.services.notifications import NotificationSender
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import to_naive_utc, utcnow
from weekly_recs.domain.entities import CycleStatus
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings

from .cycle_compiler import CycleCompiler
from .dtos import CompileCycleResponse

logger = logging.getLogger(__name__)


class CloseCycleUseCase:
    """
    Use case for closing the open cycle.

    Business Rules:
    - Fails with NO_ACTIVE_WINDOW when nothing is open
    - The closed status is committed before compiling, so a crash leaves a
      recoverable closed cycle rather than a reopened one
    - Compilation (streaks, distribution, compiled status) via CycleCompiler
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(
        self, now: Optional[datetime] = None
    ) -> Result[CompileCycleResponse]:
        now = to_naive_utc(now) if now else utcnow()

        async with self.uow:
            cycle = await self.uow.cycles.get_open()
            if cycle is None:
                logger.warning("No open cycle to close")
                return Return.err(
                    Error(ErrorCode.no_active_window, "There is no open cycle to close")
                )

            cycle.status = CycleStatus.closed
            cycle.closed_at = now
            await self.uow.cycles.update(cycle)
            await self.uow.commit()

            logger.info(f"Cycle {cycle.cycle_number} closed")

            compiler = CycleCompiler(self.uow, self.notifier, self.settings)
            return await compiler.compile(cycle)
