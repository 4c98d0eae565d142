from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ApiKey


class IApiKeyRepository(ABC):
    """ApiKey repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, api_key_id: UUID) -> Optional[ApiKey]:
        """Get API key by ID"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[ApiKey]:
        """Get all API keys owned by a user, newest first"""
        pass

    @abstractmethod
    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new API key"""
        pass

    @abstractmethod
    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing API key"""
        pass
