from typing import Iterable, List, Optional
from uuid import UUID

from sqlmodel import select

from weekly_recs.adapter.repositories.base import SqlModelRepository
from weekly_recs.app.repositories.member_repository import IMemberRepository
from weekly_recs.domain.entities import Member


class MemberRepository(SqlModelRepository, IMemberRepository):
    """Member repository implementation using SQLModel"""

    async def get_by_id(self, member_id: UUID) -> Optional[Member]:
        """Get member by ID"""
        stmt = select(Member).where(Member.id == member_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Member]:
        """Get member by normalized email address"""
        stmt = select(Member).where(Member.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_active(self) -> List[Member]:
        """Get all active members"""
        stmt = select(Member).where(Member.is_active == True).order_by(Member.joined_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_ids(self, member_ids: Iterable[UUID]) -> List[Member]:
        """Get members by IDs"""
        ids = list(member_ids)
        if not ids:
            return []
        stmt = select(Member).where(Member.id.in_(ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, member: Member) -> Member:
        """Create a new member"""
        return await self._save(member)

    async def update(self, member: Member) -> Member:
        """Update existing member"""
        return await self._save(member)
