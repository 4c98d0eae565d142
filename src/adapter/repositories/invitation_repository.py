from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, Organization


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_redeemable_by_email(
        self, email: str, now: datetime
    ) -> List[Invitation]:
        """Get pending invitations for an email, newest first"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.email == email,
                Invitation.used_at.is_(None),
                Invitation.expires_at > now,
            )
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_pending(self, now: datetime) -> List[Tuple[Invitation, Optional[str]]]:
        """Get all pending invitations with their organization name, newest first"""
        stmt = (
            select(Invitation, Organization.name)
            .outerjoin(Organization, Organization.id == Invitation.organization_id)
            .where(Invitation.used_at.is_(None), Invitation.expires_at > now)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_used(self, invitation_id: UUID, now: datetime) -> bool:
        """Consume a pending invitation, guarded on used_at so only one caller wins"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.used_at.is_(None),
                Invitation.expires_at > now,
            )
            .values(used_at=now)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def expire(
        self, invitation_id: UUID, now: datetime, expires_at: datetime
    ) -> bool:
        """Back-date a pending invitation's expiry"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.used_at.is_(None),
                Invitation.expires_at > now,
            )
            .values(expires_at=expires_at)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
