"""
Scheduled Jobs

Cron entry points for the weekly cycle. Each job opens its own session and
unit of work, runs one use case and logs the structured result.

Suggested schedule (in TIMEZONE):
    open-cycle         Thursday 09:00
    close-cycle        Sunday 18:00
    send-reminders     hourly (only acts within REMINDER_WINDOW_HOURS)
    sweep-eligibility  daily 10:00
    sweep-invitations  daily 10:00
    cleanup            weekly
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict

import typer

from weekly_recs.adapter.services.logging_notifier import LoggingNotificationSender
from weekly_recs.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from weekly_recs.app.use_cases import (
    CleanupOldDataUseCase,
    CloseCycleUseCase,
    OpenCycleUseCase,
    SendRemindersUseCase,
    SweepEligibilityUseCase,
    SweepExpiredInvitationsUseCase,
)
from weekly_recs.config import ApplicationConfig
from weekly_recs.database import create_engine, create_session_factory, create_tables
from weekly_recs.domain.result import Result
from weekly_recs.domain.settings import CycleSettings

logger = logging.getLogger(__name__)

JobFn = Callable[..., Awaitable[Result]]

JOBS: Dict[str, JobFn] = {
    "open-cycle": lambda uow, notifier, settings: OpenCycleUseCase(
        uow, notifier, settings
    ).execute(),
    "close-cycle": lambda uow, notifier, settings: CloseCycleUseCase(
        uow, notifier, settings
    ).execute(),
    "send-reminders": lambda uow, notifier, settings: SendRemindersUseCase(
        uow, notifier, settings
    ).execute(),
    "sweep-eligibility": lambda uow, notifier, settings: SweepEligibilityUseCase(
        uow, notifier, settings
    ).execute(),
    "sweep-invitations": lambda uow, notifier, settings: SweepExpiredInvitationsUseCase(
        uow
    ).execute(),
    "cleanup": lambda uow, notifier, settings: CleanupOldDataUseCase(
        uow, settings
    ).execute(),
}

app = typer.Typer(
    name="weekly-recs-jobs",
    help="Run one scheduled weekly cycle job",
    no_args_is_help=True,
)


async def run_job(name: str, config=ApplicationConfig) -> Result:
    """
    Run a single job against the configured database.

    Args:
        name: One of JOBS
        config: Configuration class (ApplicationConfig by default)

    Returns:
        The use case Result. An err Result is logged as a warning; the next
        scheduled run retries.
    """
    if name not in JOBS:
        raise KeyError(f"Unknown job '{name}'; expected one of {', '.join(JOBS)}")

    engine = create_engine(config.DB_URI)
    try:
        await create_tables(engine)
        session_factory = create_session_factory(engine)
        async with session_factory() as session:
            result = await JOBS[name](
                SqlAlchemyUnitOfWork(session),
                LoggingNotificationSender(),
                CycleSettings.from_config(config),
            )
    finally:
        await engine.dispose()

    if result.is_err():
        logger.warning(f"Job {name} did not run: {result.to_payload()}")
    else:
        logger.info(f"Job {name} completed: {result.to_payload()}")
    return result


@app.command("run")
def run(name: str = typer.Argument(..., help=f"Job name ({', '.join(JOBS)})")) -> None:
    """Run a job by name.

    Examples:
        python jobs.py run open-cycle
        python jobs.py run close-cycle
    """
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if name not in JOBS:
        typer.echo(f"Unknown job '{name}'. Available: {', '.join(JOBS)}", err=True)
        raise typer.Exit(code=2)

    try:
        asyncio.run(run_job(name))
    except Exception:
        logger.exception(f"Job {name} failed")
        raise typer.Exit(code=1)


@app.command("list")
def list_jobs() -> None:
    """List available jobs."""
    for name in JOBS:
        typer.echo(name)
