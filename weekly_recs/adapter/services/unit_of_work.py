from sqlmodel.ext.asyncio.session import AsyncSession

from weekly_recs.adapter.repositories.cycle_repository import CycleRepository
from weekly_recs.adapter.repositories.invitation_repository import InvitationRepository
from weekly_recs.adapter.repositories.member_repository import MemberRepository
from weekly_recs.adapter.repositories.streak_repository import StreakRepository
from weekly_recs.adapter.repositories.streak_update_repository import StreakUpdateRepository
from weekly_recs.adapter.repositories.submission_repository import SubmissionRepository
from weekly_recs.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.members = MemberRepository(self.session)
        self.cycles = CycleRepository(self.session)
        self.submissions = SubmissionRepository(self.session)
        self.streaks = StreakRepository(self.session)
        self.streak_updates = StreakUpdateRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    def savepoint(self):
        return self.session.begin_nested()
