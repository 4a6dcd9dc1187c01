from uuid import uuid4

import pytest

from weekly_recs.app.use_cases.cycles import CloseCycleUseCase, ManualCompileUseCase
from weekly_recs.domain.entities import CycleStatus, Submission
from tests.fixtures.factories import make_cycle, make_member, make_streak


def submission_for(member, cycle):
    return Submission(
        id=uuid4(),
        member_id=member.id,
        cycle_id=cycle.id,
        recommendation="Station Eleven",
        reasons="Hopeful",
        message="Worth it",
    )


@pytest.mark.asyncio
async def test_close_without_open_cycle(mock_uow, notifier, settings):
    result = await CloseCycleUseCase(mock_uow, notifier, settings).execute()

    assert result.error.code == "NO_ACTIVE_WINDOW"
    mock_uow.cycles.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_close_compiles_and_updates_every_active_member(mock_uow, notifier, settings):
    alice = make_member("alice@acme.com", first_name="Alice")
    bob = make_member("bob@acme.com")
    cycle = make_cycle(202504)
    alice_streak = make_streak(alice.id, current=3, last_cycle_number=202503)
    submissions = [submission_for(alice, cycle)]

    mock_uow.cycles.get_open.return_value = cycle
    mock_uow.submissions.list_by_cycle.return_value = submissions
    mock_uow.members.list_active.return_value = [alice, bob]
    mock_uow.members.list_by_ids.return_value = [alice]
    mock_uow.streaks.get_by_member_id.side_effect = (
        lambda member_id: alice_streak if member_id == alice.id else None
    )

    result = await CloseCycleUseCase(mock_uow, notifier, settings).execute()

    assert result.is_ok()
    response = result.value
    assert response.status == "compiled"
    assert response.submission_count == 1
    assert response.participants_notified == 1
    assert response.streaks_updated == 2
    assert response.newly_eligible == 1

    assert cycle.status == CycleStatus.compiled
    assert cycle.closed_at is not None
    assert cycle.compiled_at is not None
    assert alice_streak.current_streak == 4
    assert alice_streak.can_invite is True

    bob_streak = mock_uow.streaks.create.call_args.args[0]
    assert bob_streak.member_id == bob.id
    assert bob_streak.current_streak == 0

    assert mock_uow.streak_updates.create.call_count == 2
    assert mock_uow.savepoint.call_count == 2
    notifier.send_compilation_notice.assert_awaited_once_with([alice], submissions, cycle)
    notifier.send_eligibility_granted.assert_awaited_once_with(alice, 4)


@pytest.mark.asyncio
async def test_close_with_zero_submissions_still_compiles(mock_uow, notifier, settings):
    cycle = make_cycle(202504)
    mock_uow.cycles.get_open.return_value = cycle
    mock_uow.members.list_active.return_value = [make_member()]

    result = await CloseCycleUseCase(mock_uow, notifier, settings).execute()

    assert result.is_ok()
    assert result.value.submission_count == 0
    assert result.value.participants_notified == 0
    assert cycle.status == CycleStatus.compiled
    notifier.send_compilation_notice.assert_not_called()


@pytest.mark.asyncio
async def test_failed_member_update_leaves_cycle_closed(mock_uow, notifier, settings):
    alice = make_member("alice@acme.com")
    bob = make_member("bob@acme.com")
    cycle = make_cycle(202504)
    mock_uow.cycles.get_open.return_value = cycle
    mock_uow.members.list_active.return_value = [alice, bob]

    def get_streak(member_id):
        if member_id == bob.id:
            raise RuntimeError("database hiccup")
        return None

    mock_uow.streaks.get_by_member_id.side_effect = get_streak

    result = await CloseCycleUseCase(mock_uow, notifier, settings).execute()

    assert result.is_err()
    assert result.error.code == "CONFLICT"
    assert cycle.status == CycleStatus.closed
    assert cycle.compiled_at is None
    # Alice's update is kept for the recompile
    assert mock_uow.streak_updates.create.call_count == 1
    assert mock_uow.commit.call_count == 2
    notifier.send_compilation_notice.assert_not_called()


@pytest.mark.asyncio
async def test_compilation_notice_failure_does_not_block_compile(
    mock_uow, notifier, settings
):
    alice = make_member()
    cycle = make_cycle(202504)
    mock_uow.cycles.get_open.return_value = cycle
    mock_uow.submissions.list_by_cycle.return_value = [submission_for(alice, cycle)]
    mock_uow.members.list_active.return_value = [alice]
    mock_uow.members.list_by_ids.return_value = [alice]
    notifier.send_compilation_notice.side_effect = RuntimeError("smtp down")

    result = await CloseCycleUseCase(mock_uow, notifier, settings).execute()

    assert result.is_ok()
    assert result.value.participants_notified == 0
    assert cycle.status == CycleStatus.compiled


@pytest.mark.asyncio
async def test_eligibility_granted_before_failure_is_announced_once(
    mock_uow, notifier, settings
):
    """A member who became eligible in a failed close is told exactly once"""
    alice = make_member("alice@acme.com", first_name="Alice")
    bob = make_member("bob@acme.com")
    cycle = make_cycle(202504)
    alice_streak = make_streak(alice.id, current=3, last_cycle_number=202503)
    mock_uow.cycles.get_open.return_value = cycle
    mock_uow.submissions.list_by_cycle.return_value = [submission_for(alice, cycle)]
    mock_uow.members.list_active.return_value = [alice, bob]
    mock_uow.members.list_by_ids.return_value = [alice]

    def flaky_streak(member_id):
        if member_id == bob.id:
            raise RuntimeError("database hiccup")
        return alice_streak

    mock_uow.streaks.get_by_member_id.side_effect = flaky_streak

    closed = await CloseCycleUseCase(mock_uow, notifier, settings).execute()

    assert closed.error.code == "CONFLICT"
    assert alice_streak.can_invite is True
    notifier.send_eligibility_granted.assert_awaited_once_with(alice, 4)

    # Recompile: Alice is already in the ledger, Bob now succeeds
    mock_uow.cycles.get_by_number.return_value = cycle
    mock_uow.streak_updates.member_ids_for_cycle.return_value = {alice.id}
    mock_uow.streaks.get_by_member_id.side_effect = None
    mock_uow.streaks.get_by_member_id.return_value = None

    recompiled = await ManualCompileUseCase(mock_uow, notifier, settings).execute(202504)

    assert recompiled.is_ok()
    assert recompiled.value.streaks_updated == 1
    assert cycle.status == CycleStatus.compiled
    notifier.send_eligibility_granted.assert_awaited_once_with(alice, 4)
