"""
Check Eligibility Use Case

Reports whether a member may send invitations right now.
"""

from weekly_recs.app.services.eligibility_policy import EligibilityPolicy
from weekly_recs.app.services.unit_of_work import UnitOfWork
from weekly_recs.domain.entities import normalize_email
from weekly_recs.domain.result import Result, Return
from weekly_recs.domain.settings import CycleSettings

from .dtos import EligibilityResponse


class CheckEligibilityUseCase:
    """
    Use case for checking invite eligibility.

    Fails closed: unknown or inactive members, missing streaks, streaks below
    the threshold and exhausted caps all come back as eligible=False with a
    reason, never as an error.
    """

    def __init__(self, uow: UnitOfWork, settings: CycleSettings):
        self.uow = uow
        self.settings = settings

    async def execute(self, member_email: str) -> Result[EligibilityResponse]:
        email = normalize_email(member_email)

        async with self.uow:
            member = await self.uow.members.get_by_email(email)
            status = await EligibilityPolicy(self.uow, self.settings).evaluate(member)

        return Return.ok(EligibilityResponse(member_email=email, **status.model_dump()))
