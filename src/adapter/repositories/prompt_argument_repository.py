from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.prompt_argument_repository import IPromptArgumentRepository
from src.domain.entities import PromptArgument


class PromptArgumentRepository(IPromptArgumentRepository):
    """PromptArgument repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_prompt(self, prompt_id: UUID) -> List[PromptArgument]:
        """Get arguments of a prompt ordered by name"""
        stmt = (
            select(PromptArgument)
            .where(PromptArgument.prompt_id == prompt_id)
            .order_by(PromptArgument.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_prompt_and_name(
        self, prompt_id: UUID, name: str
    ) -> Optional[PromptArgument]:
        """Get argument by prompt and name"""
        stmt = select(PromptArgument).where(
            PromptArgument.prompt_id == prompt_id, PromptArgument.name == name
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, argument: PromptArgument) -> PromptArgument:
        """Create a new argument"""
        self.session.add(argument)
        await self.session.flush()
        await self.session.refresh(argument)
        return argument
