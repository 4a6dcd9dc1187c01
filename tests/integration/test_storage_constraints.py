"""Uniqueness guarantees enforced by the database itself, below the use cases"""

from datetime import timedelta

import pytest

from weekly_recs.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from weekly_recs.app.repositories.errors import DuplicateRecordError
from weekly_recs.domain.cycle_calendar import utcnow
from weekly_recs.domain.entities import CycleStatus, InvitationStatus, StreakUpdate, Submission
from tests.fixtures.factories import make_cycle, make_invitation, make_member


def submission(member, cycle):
    return Submission(
        member_id=member.id,
        cycle_id=cycle.id,
        recommendation="Middlemarch",
        reasons="Patient",
        message="Long but kind",
    )


@pytest.mark.asyncio
async def test_one_submission_per_member_per_cycle(session_factory, seed):
    member, cycle = make_member(), make_cycle(202001)
    await seed(member, cycle)

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            await uow.submissions.create(submission(member, cycle))
            with pytest.raises(DuplicateRecordError):
                await uow.submissions.create(submission(member, cycle))


@pytest.mark.asyncio
async def test_single_open_cycle(session_factory, seed):
    await seed(make_cycle(202001))

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            with pytest.raises(DuplicateRecordError):
                await uow.cycles.create(make_cycle(202002))


@pytest.mark.asyncio
async def test_closed_cycles_do_not_count_as_open(session_factory, seed):
    await seed(
        make_cycle(202001, status=CycleStatus.compiled),
        make_cycle(202002, status=CycleStatus.compiled),
    )

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            await uow.cycles.create(make_cycle(202003))
            await uow.commit()
            assert (await uow.cycles.get_open()).cycle_number == 202003


@pytest.mark.asyncio
async def test_one_pending_invitation_per_email(session_factory, seed):
    inviter = make_member()
    await seed(inviter)
    await seed(
        make_invitation(
            inviter.id,
            "newfriend@acme.com",
            status=InvitationStatus.expired,
            sent_at=utcnow() - timedelta(days=20),
        ),
        make_invitation(inviter.id, "newfriend@acme.com"),
    )

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            with pytest.raises(DuplicateRecordError):
                await uow.invitations.create(make_invitation(inviter.id, "newfriend@acme.com"))


@pytest.mark.asyncio
async def test_streak_update_recorded_once_per_cycle(session_factory, seed):
    member = make_member()
    await seed(member)

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            await uow.streak_updates.create(
                StreakUpdate(member_id=member.id, cycle_number=202001, submitted=True)
            )
            with pytest.raises(DuplicateRecordError):
                await uow.streak_updates.create(
                    StreakUpdate(member_id=member.id, cycle_number=202001, submitted=False)
                )


@pytest.mark.asyncio
async def test_failed_savepoint_keeps_outer_work(session_factory, seed):
    member = make_member()
    await seed(member)

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            await uow.streak_updates.create(
                StreakUpdate(member_id=member.id, cycle_number=202001)
            )
            with pytest.raises(DuplicateRecordError):
                async with uow.savepoint():
                    await uow.streak_updates.create(
                        StreakUpdate(member_id=member.id, cycle_number=202001)
                    )
            await uow.commit()

            assert await uow.streak_updates.exists(member.id, 202001)
