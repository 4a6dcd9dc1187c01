from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from sqlmodel import delete, func, select, update

from weekly_recs.adapter.repositories.base import SqlModelRepository
from weekly_recs.app.repositories.invitation_repository import IInvitationRepository
from weekly_recs.domain.entities import Invitation, InvitationStatus

ACTIVE_STATUSES = (InvitationStatus.pending, InvitationStatus.accepted)


class InvitationRepository(SqlModelRepository, IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_email(self, email: str, now: datetime) -> Optional[Invitation]:
        """Get the unexpired pending invitation for an invitee email"""
        stmt = select(Invitation).where(
            Invitation.invitee_email == email,
            Invitation.status == InvitationStatus.pending,
            Invitation.expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def count_active_by_inviter(self, inviter_id: UUID) -> int:
        """Count an inviter's pending and accepted invitations"""
        stmt = select(func.count(Invitation.id)).where(
            Invitation.inviter_id == inviter_id,
            Invitation.status.in_(ACTIVE_STATUSES),
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def active_counts_by_inviter(self) -> Dict[UUID, int]:
        """Pending and accepted invitation counts keyed by inviter ID"""
        stmt = (
            select(Invitation.inviter_id, func.count(Invitation.id))
            .where(Invitation.status.in_(ACTIVE_STATUSES))
            .group_by(Invitation.inviter_id)
        )
        result = await self.session.exec(stmt)
        return {inviter_id: count for inviter_id, count in result.all()}

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        return await self._save(invitation)

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        return await self._save(invitation)

    async def expire_pending(self, now: datetime, email: Optional[str] = None) -> int:
        """Mark pending invitations past expiry as expired, optionally for one email"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.status == InvitationStatus.pending,
                Invitation.expires_at <= now,
            )
            .values(status=InvitationStatus.expired)
        )
        if email is not None:
            stmt = stmt.where(Invitation.invitee_email == email)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete expired invitations whose expiry is older than cutoff"""
        stmt = delete(Invitation).where(
            Invitation.status == InvitationStatus.expired,
            Invitation.expires_at < cutoff,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
