from typing import List, Optional
from uuid import UUID

from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.organization_repository import IOrganizationRepository
from src.domain.entities import Membership, Organization


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        stmt = select(Organization).where(Organization.id == organization_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_public(self) -> Optional[Organization]:
        """Get the canonical public organization (oldest public row)"""
        stmt = (
            select(Organization)
            .where(Organization.is_public == True)  # noqa: E712
            .order_by(Organization.created_at.asc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[Organization]:
        """Get every organization, newest first"""
        stmt = select(Organization).order_by(Organization.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_visible_to(self, user_id: UUID) -> List[Organization]:
        """Get organizations the user belongs to plus public ones, newest first"""
        member_of = select(Membership.organization_id).where(
            Membership.user_id == user_id
        )
        stmt = (
            select(Organization)
            .where(
                or_(
                    Organization.id.in_(member_of),
                    Organization.is_public == True,  # noqa: E712
                )
            )
            .order_by(Organization.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization

    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization
