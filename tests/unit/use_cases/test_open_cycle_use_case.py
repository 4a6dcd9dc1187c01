from datetime import UTC, datetime

import pytest

from weekly_recs.app.repositories.errors import DuplicateRecordError
from weekly_recs.app.use_cases.cycles import OpenCycleUseCase
from weekly_recs.domain.entities import Cycle, CycleStatus
from tests.fixtures.factories import make_cycle, make_member

NOW = datetime(2025, 1, 23, 14, 30, tzinfo=UTC)  # Thursday 09:30 EST


@pytest.mark.asyncio
async def test_open_cycle_success(mock_uow, notifier, settings):
    members = [make_member("alice@acme.com"), make_member("bob@acme.com")]
    mock_uow.members.list_active.return_value = members

    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.is_ok()
    response = result.value
    assert response.cycle_number == 202504
    assert response.opens_at == datetime(2025, 1, 23, 14, 0)
    assert response.deadline == datetime(2025, 1, 26, 23, 0)
    assert [m.email for m in response.members] == ["alice@acme.com", "bob@acme.com"]

    created = mock_uow.cycles.create.call_args.args[0]
    assert isinstance(created, Cycle)
    assert created.status == CycleStatus.open
    mock_uow.commit.assert_called_once()
    notifier.send_window_open_notice.assert_awaited_once_with(members, created)


@pytest.mark.asyncio
async def test_open_cycle_conflict_when_already_open(mock_uow, notifier, settings):
    """Second open in the same week is refused, the first stays unchanged"""
    mock_uow.cycles.get_open.return_value = make_cycle(202504)

    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.is_err()
    assert result.error.code == "CONFLICT"
    assert "202504" in result.error.message
    mock_uow.cycles.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    notifier.send_window_open_notice.assert_not_called()


@pytest.mark.asyncio
async def test_open_cycle_blocked_by_uncompiled_cycle(mock_uow, notifier, settings):
    mock_uow.cycles.list_by_status.return_value = [
        make_cycle(202503, status=CycleStatus.closed)
    ]

    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.is_err()
    assert result.error.code == "CONFLICT"
    assert "202503" in result.error.message
    mock_uow.cycles.list_by_status.assert_called_once_with(CycleStatus.closed)
    mock_uow.cycles.create.assert_not_called()


@pytest.mark.asyncio
async def test_open_cycle_conflict_when_number_exists(mock_uow, notifier, settings):
    mock_uow.cycles.get_by_number.return_value = make_cycle(
        202504, status=CycleStatus.compiled
    )

    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.error.code == "CONFLICT"
    mock_uow.cycles.get_by_number.assert_called_once_with(202504)


@pytest.mark.asyncio
async def test_open_cycle_concurrent_open_is_conflict(mock_uow, notifier, settings):
    mock_uow.cycles.create.side_effect = DuplicateRecordError("Cycle")

    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.error.code == "CONFLICT"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_open_cycle_notification_failure_keeps_cycle(mock_uow, notifier, settings):
    mock_uow.members.list_active.return_value = [make_member()]
    notifier.send_window_open_notice.side_effect = RuntimeError("smtp down")

    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.is_ok()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_open_cycle_without_members_skips_notice(mock_uow, notifier, settings):
    result = await OpenCycleUseCase(mock_uow, notifier, settings).execute(now=NOW)

    assert result.is_ok()
    assert result.value.members == []
    notifier.send_window_open_notice.assert_not_called()
