from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Membership, Organization, OrganizationRole


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        stmt = select(Membership).where(
            Membership.user_id == user_id,
            Membership.organization_id == organization_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists_with_role(self, user_id: UUID, role: OrganizationRole) -> bool:
        """Check whether the user holds the role in any organization"""
        stmt = (
            select(Membership.id)
            .where(Membership.user_id == user_id, Membership.role == role)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def any_with_role(self, role: OrganizationRole) -> bool:
        """Check whether anyone holds the role in any organization"""
        stmt = select(Membership.id).where(Membership.role == role).limit(1)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships of a user"""
        stmt = select(Membership).where(Membership.user_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_organization_id(self, organization_id: UUID) -> List[Membership]:
        """Get all memberships for an organization"""
        stmt = (
            select(Membership)
            .where(Membership.organization_id == organization_id)
            .order_by(Membership.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_with_organizations(self) -> List[Tuple[Membership, Organization]]:
        """Get every membership joined with its organization"""
        stmt = (
            select(Membership, Organization)
            .join(Organization, Organization.id == Membership.organization_id)
            .order_by(Organization.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
