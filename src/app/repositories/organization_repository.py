from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Organization


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def get_public(self) -> Optional[Organization]:
        """Get the canonical public organization (oldest public row)"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Organization]:
        """Get every organization, newest first"""
        pass

    @abstractmethod
    async def list_visible_to(self, user_id: UUID) -> List[Organization]:
        """Get organizations the user belongs to plus public ones, newest first"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass

    @abstractmethod
    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        pass
