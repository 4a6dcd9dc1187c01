from unittest.mock import AsyncMock, MagicMock

import pytest

from weekly_recs.domain.settings import CycleSettings


@pytest.fixture
def settings():
    return CycleSettings()


@pytest.fixture
def notifier():
    """Mock NotificationSender; every send_* is an AsyncMock"""
    return AsyncMock()


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=savepoint)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    uow.savepoint = MagicMock(return_value=savepoint)

    # Mock repositories
    uow.members = MagicMock()
    uow.members.get_by_id = AsyncMock(return_value=None)
    uow.members.get_by_email = AsyncMock(return_value=None)
    uow.members.list_active = AsyncMock(return_value=[])
    uow.members.list_by_ids = AsyncMock(return_value=[])
    uow.members.create = AsyncMock()
    uow.members.update = AsyncMock()

    uow.cycles = MagicMock()
    uow.cycles.get_open = AsyncMock(return_value=None)
    uow.cycles.get_by_number = AsyncMock(return_value=None)
    uow.cycles.list_by_status = AsyncMock(return_value=[])
    uow.cycles.create = AsyncMock()
    uow.cycles.update = AsyncMock()
    uow.cycles.delete_compiled_before = AsyncMock(return_value=0)

    uow.submissions = MagicMock()
    uow.submissions.get_by_member_and_cycle = AsyncMock(return_value=None)
    uow.submissions.list_by_cycle = AsyncMock(return_value=[])
    uow.submissions.create = AsyncMock()

    uow.streaks = MagicMock()
    uow.streaks.get_by_member_id = AsyncMock(return_value=None)
    uow.streaks.map_by_member_ids = AsyncMock(return_value={})
    uow.streaks.create = AsyncMock()
    uow.streaks.update = AsyncMock()

    uow.streak_updates = MagicMock()
    uow.streak_updates.exists = AsyncMock(return_value=False)
    uow.streak_updates.member_ids_for_cycle = AsyncMock(return_value=set())
    uow.streak_updates.create = AsyncMock()

    uow.invitations = MagicMock()
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_email = AsyncMock(return_value=None)
    uow.invitations.count_active_by_inviter = AsyncMock(return_value=0)
    uow.invitations.active_counts_by_inviter = AsyncMock(return_value={})
    uow.invitations.create = AsyncMock()
    uow.invitations.update = AsyncMock()
    uow.invitations.expire_pending = AsyncMock(return_value=0)
    uow.invitations.delete_expired_before = AsyncMock(return_value=0)

    return uow
