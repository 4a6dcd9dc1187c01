"""
Open Cycle Use Case

Opens the weekly submission window and prompts every active member.
"""

import logging
from datetime import datetime
from typing import Optional

from weekly_recs.app.repositories.errors import DuplicateRecordError
from weekly_recs.app.services.notifications import NotificationSender, deliver
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.cycle_calendar import cycle_id, to_naive_utc, utcnow, window_bounds
from weekly_recs.domain.entities import Cycle, CycleStatus
from weekly_recs.domain.result import Error, ErrorCode, Result, Return
from weekly_recs.domain.settings import CycleSettings

from .dtos import MemberSummary, OpenCycleResponse

logger = logging.getLogger(__name__)


class OpenCycleUseCase:
    """
    Use case for opening a new weekly cycle.

    Business Rules:
    - Only one open cycle at a time (CONFLICT means "already running")
    - A closed cycle that has not been compiled blocks new cycles
    - Cycle number comes from the current instant in the configured timezone
    - Window bounds come from the configured open/close day and hour
    - Active members are prompted after commit
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationSender, settings: CycleSettings
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(self, now: Optional[datetime] = None) -> Result[OpenCycleResponse]:
        """
        Execute open cycle use case.

        Args:
            now: Current instant (defaults to the system clock)

        Returns:
            Result with OpenCycleResponse DTO, or Error
        """
        now = to_naive_utc(now) if now else utcnow()

        async with self.uow:
            open_cycle = await self.uow.cycles.get_open()
            if open_cycle is not None:
                logger.warning(
                    f"Cycle {open_cycle.cycle_number} is already open, skipping"
                )
                return Return.err(
                    Error(
                        ErrorCode.conflict,
                        f"Cycle {open_cycle.cycle_number} is already open",
                    )
                )

            uncompiled = await self.uow.cycles.list_by_status(CycleStatus.closed)
            if uncompiled:
                numbers = ", ".join(str(cycle.cycle_number) for cycle in uncompiled)
                return Return.err(
                    Error(
                        ErrorCode.conflict,
                        f"Cycle(s) {numbers} closed but not compiled; compile before opening",
                    )
                )

            cycle_number = cycle_id(now, self.settings.timezone)
            if await self.uow.cycles.get_by_number(cycle_number) is not None:
                return Return.err(
                    Error(ErrorCode.conflict, f"Cycle {cycle_number} already exists")
                )

            opens_at, deadline = window_bounds(
                now,
                self.settings.timezone,
                self.settings.window_open_weekday,
                self.settings.window_open_hour,
                self.settings.window_close_weekday,
                self.settings.window_close_hour,
            )

            cycle = Cycle(
                cycle_number=cycle_number,
                status=CycleStatus.open,
                opens_at=opens_at,
                deadline=deadline,
            )
            try:
                await self.uow.cycles.create(cycle)
            except DuplicateRecordError:
                return Return.err(
                    Error(ErrorCode.conflict, "Another cycle was opened concurrently")
                )

            members = await self.uow.members.list_active()

            await self.uow.commit()

        logger.info(
            f"Opened cycle {cycle.cycle_number}: deadline={cycle.deadline.isoformat()} "
            f"members={len(members)}"
        )

        if members:
            await deliver(
                "window_open", self.notifier.send_window_open_notice(members, cycle)
            )
        else:
            logger.warning("No active members to prompt for the new cycle")

        return Return.ok(
            OpenCycleResponse(
                cycle_id=str(cycle.id),
                cycle_number=cycle.cycle_number,
                opens_at=cycle.opens_at,
                deadline=cycle.deadline,
                members=[
                    MemberSummary(
                        id=str(member.id),
                        email=member.email,
                        display_name=member.display_name,
                    )
                    for member in members
                ],
            )
        )
