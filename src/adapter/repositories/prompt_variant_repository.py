from typing import List
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.prompt_variant_repository import IPromptVariantRepository
from src.domain.entities import PromptVariant


class PromptVariantRepository(IPromptVariantRepository):
    """PromptVariant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_prompt(self, prompt_id: UUID) -> List[PromptVariant]:
        """Get variants of a prompt, oldest first"""
        stmt = (
            select(PromptVariant)
            .where(PromptVariant.prompt_id == prompt_id)
            .order_by(PromptVariant.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def clear_default(self, prompt_id: UUID) -> None:
        """Unset is_default on every variant of a prompt"""
        stmt = (
            update(PromptVariant)
            .where(PromptVariant.prompt_id == prompt_id)
            .values(is_default=False)
        )
        await self.session.execute(stmt)

    async def create(self, variant: PromptVariant) -> PromptVariant:
        """Create a new variant"""
        self.session.add(variant)
        await self.session.flush()
        await self.session.refresh(variant)
        return variant
