import pytest

from weekly_recs.app.services.streak_tracker import StreakTracker
from weekly_recs.domain.entities import Streak, StreakUpdate
from tests.fixtures.factories import make_member, make_streak


@pytest.mark.asyncio
async def test_already_processed_cycle_is_rejected(mock_uow, settings):
    """A (member, cycle) pair already in the ledger is never applied again"""
    member = make_member()
    mock_uow.streak_updates.exists.return_value = True

    result = await StreakTracker(mock_uow, settings).update(member, 202504, True, 0)

    assert result.is_err()
    assert result.error.code == "ALREADY_PROCESSED"
    mock_uow.streaks.create.assert_not_called()
    mock_uow.streaks.update.assert_not_called()
    mock_uow.streak_updates.create.assert_not_called()


@pytest.mark.asyncio
async def test_first_update_creates_streak_and_ledger_entry(mock_uow, settings):
    member = make_member()

    result = await StreakTracker(mock_uow, settings).update(member, 202504, True, 0)

    assert result.is_ok()
    assert result.value.current_streak == 1
    assert result.value.can_invite is False

    created = mock_uow.streaks.create.call_args.args[0]
    assert isinstance(created, Streak)
    assert created.member_id == member.id
    assert created.last_cycle_number == 202504

    entry = mock_uow.streak_updates.create.call_args.args[0]
    assert isinstance(entry, StreakUpdate)
    assert entry.cycle_number == 202504
    assert entry.submitted is True
    assert entry.resulting_streak == 1


@pytest.mark.asyncio
async def test_reaching_threshold_grants_eligibility(mock_uow, settings):
    member = make_member()
    streak = make_streak(member.id, current=3, last_cycle_number=202503)
    mock_uow.streaks.get_by_member_id.return_value = streak

    result = await StreakTracker(mock_uow, settings).update(member, 202504, True, 0)

    assert result.value.current_streak == 4
    assert result.value.can_invite is True
    assert result.value.eligibility_granted is True
    assert streak.invite_eligible_since is not None
    mock_uow.streaks.update.assert_called_once_with(streak)


@pytest.mark.asyncio
async def test_eligibility_is_granted_once_over_consecutive_cycles(mock_uow, settings):
    member = make_member()
    stored = {}

    async def create(streak):
        stored[streak.member_id] = streak
        return streak

    mock_uow.streaks.get_by_member_id.side_effect = lambda member_id: stored.get(member_id)
    mock_uow.streaks.create.side_effect = create

    tracker = StreakTracker(mock_uow, settings)
    grants = []
    for cycle_number in (202450, 202451, 202452, 202501, 202502):
        result = await tracker.update(member, cycle_number, True, 0)
        grants.append(result.value.eligibility_granted)

    assert grants == [False, False, False, True, False]
    assert stored[member.id].current_streak == 5


@pytest.mark.asyncio
async def test_exhausted_cap_blocks_eligibility(mock_uow, settings):
    member = make_member()
    streak = make_streak(member.id, current=4, last_cycle_number=202503, can_invite=True)
    mock_uow.streaks.get_by_member_id.return_value = streak

    result = await StreakTracker(mock_uow, settings).update(member, 202504, True, 5)

    assert result.value.current_streak == 5
    assert result.value.can_invite is False
    assert streak.can_invite is False


@pytest.mark.asyncio
async def test_missed_cycle_resets_streak_and_revokes_eligibility(mock_uow, settings):
    member = make_member()
    streak = make_streak(
        member.id, current=6, last_cycle_number=202503, longest_streak=8, can_invite=True
    )
    mock_uow.streaks.get_by_member_id.return_value = streak

    result = await StreakTracker(mock_uow, settings).update(member, 202504, False, 0)

    assert result.value.current_streak == 0
    assert result.value.longest_streak == 8
    assert result.value.can_invite is False
    assert streak.last_cycle_number == 202503
