"""
Manual Compile Use Case

Administrative override for compiling a cycle out of band.
"""

import logging
from typing import Optional

from weekly_recs.app.services.notifications import NotificationSender
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.entities import CycleStatus
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings

from .close_cycle_use_case import CloseCycleUseCase
from .cycle_compiler import CycleCompiler
from .dtos import CompileCycleResponse

logger = logging.getLogger(__name__)


class ManualCompileUseCase:
    """
    Use case for compiling a specific cycle on demand.

    Business Rules:
    - Without a cycle number, behaves like the scheduled close
    - Compiled cycles are rejected with ALREADY_COMPILED
    - Open cycles must go through close (CONFLICT)
    - A closed cycle resumes compilation; members already counted are skipped
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(
        self, cycle_number: Optional[int] = None
    ) -> Result[CompileCycleResponse]:
        logger.info(f"Manual compilation triggered: cycle={cycle_number}")

        if cycle_number is None:
            return await CloseCycleUseCase(self.uow, self.notifier, self.settings).execute()

        async with self.uow:
            cycle = await self.uow.cycles.get_by_number(cycle_number)
            if cycle is None:
                return Return.err(
                    Error(ErrorCode.not_found, f"Cycle {cycle_number} not found")
                )

            if cycle.status == CycleStatus.compiled:
                return Return.err(
                    Error(
                        ErrorCode.already_compiled,
                        f"Cycle {cycle_number} is already compiled",
                    )
                )

            if cycle.status == CycleStatus.open:
                return Return.err(
                    Error(
                        ErrorCode.conflict,
                        f"Cycle {cycle_number} is still open; close it instead",
                    )
                )

            compiler = CycleCompiler(self.uow, self.notifier, self.settings)
            return await compiler.compile(cycle)
