from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Membership, Organization, OrganizationRole


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        pass

    @abstractmethod
    async def exists_with_role(self, user_id: UUID, role: OrganizationRole) -> bool:
        """Check whether the user holds the role in any organization"""
        pass

    @abstractmethod
    async def any_with_role(self, role: OrganizationRole) -> bool:
        """Check whether anyone holds the role in any organization"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships of a user"""
        pass

    @abstractmethod
    async def get_by_organization_id(self, organization_id: UUID) -> List[Membership]:
        """Get all memberships for an organization"""
        pass

    @abstractmethod
    async def list_with_organizations(self) -> List[Tuple[Membership, Organization]]:
        """Get every membership joined with its organization"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        pass
