from abc import ABC, abstractmethod
from typing import AsyncContextManager

from weekly_recs.app.repositories.cycle_repository import ICycleRepository
from weekly_recs.app.repositories.invitation_repository import IInvitationRepository
from weekly_recs.app.repositories.member_repository import IMemberRepository
from weekly_recs.app.repositories.streak_repository import IStreakRepository
from weekly_recs.app.repositories.streak_update_repository import IStreakUpdateRepository
from weekly_recs.app.repositories.submission_repository import ISubmissionRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    members: IMemberRepository
    cycles: ICycleRepository
    submissions: ISubmissionRepository
    streaks: IStreakRepository
    streak_updates: IStreakUpdateRepository
    invitations: IInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    def savepoint(self) -> AsyncContextManager:
        """Nested transaction: rolled back alone if the block raises"""
        pass
