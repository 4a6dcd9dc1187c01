from weekly_recs.adapter.services.logging_notifier import LoggingNotificationSender
from weekly_recs.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from weekly_recs.app.services.notifications import NotificationSender
from weekly_recs.config import ApplicationConfig
from weekly_recs.database import create_engine, create_session_factory
from weekly_recs.domain.settings import CycleSettings

engine = create_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = create_session_factory(engine)

_notifier = LoggingNotificationSender()
_settings = CycleSettings.from_config(ApplicationConfig)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier() -> NotificationSender:
    return _notifier


def get_settings() -> CycleSettings:
    return _settings
