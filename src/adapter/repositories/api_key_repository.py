from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.api_key_repository import IApiKeyRepository
from src.domain.entities import ApiKey


class ApiKeyRepository(IApiKeyRepository):
    """ApiKey repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, api_key_id: UUID) -> Optional[ApiKey]:
        """Get API key by ID"""
        stmt = select(ApiKey).where(ApiKey.id == api_key_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_user(self, user_id: UUID) -> List[ApiKey]:
        """Get all API keys owned by a user, newest first"""
        stmt = (
            select(ApiKey)
            .where(ApiKey.user_id == user_id)
            .order_by(ApiKey.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new API key"""
        self.session.add(api_key)
        await self.session.flush()
        await self.session.refresh(api_key)
        return api_key

    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing API key"""
        self.session.add(api_key)
        await self.session.flush()
        await self.session.refresh(api_key)
        return api_key
