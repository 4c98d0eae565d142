from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.prompt_repository import IPromptRepository
from src.domain.entities import Prompt, PromptArgument, PromptVariant


class PromptRepository(IPromptRepository):
    """Prompt repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, prompt_id: UUID) -> Optional[Prompt]:
        """Get prompt by ID"""
        stmt = select(Prompt).where(Prompt.id == prompt_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_organization_and_name(
        self, organization_id: UUID, name: str
    ) -> Optional[Prompt]:
        """Get prompt by organization and name"""
        stmt = select(Prompt).where(
            Prompt.organization_id == organization_id, Prompt.name == name
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_organization(self, organization_id: UUID) -> List[Prompt]:
        """Get all prompts of an organization, newest first"""
        stmt = (
            select(Prompt)
            .where(Prompt.organization_id == organization_id)
            .order_by(Prompt.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, prompt: Prompt) -> Prompt:
        """Create a new prompt"""
        self.session.add(prompt)
        await self.session.flush()
        await self.session.refresh(prompt)
        return prompt

    async def update(self, prompt: Prompt) -> Prompt:
        """Update existing prompt"""
        self.session.add(prompt)
        await self.session.flush()
        await self.session.refresh(prompt)
        return prompt

    async def delete(self, prompt: Prompt) -> None:
        """Delete a prompt with its variants and arguments"""
        # SQLite does not enforce ON DELETE CASCADE unless foreign keys are enabled
        for model in (PromptVariant, PromptArgument):
            children = await self.session.exec(
                select(model).where(model.prompt_id == prompt.id)
            )
            for child in children.all():
                await self.session.delete(child)
        await self.session.delete(prompt)
        await self.session.flush()
