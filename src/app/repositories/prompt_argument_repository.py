from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PromptArgument


class IPromptArgumentRepository(ABC):
    """PromptArgument repository interface - application layer"""

    @abstractmethod
    async def list_by_prompt(self, prompt_id: UUID) -> List[PromptArgument]:
        """Get arguments of a prompt ordered by name"""
        pass

    @abstractmethod
    async def get_by_prompt_and_name(
        self, prompt_id: UUID, name: str
    ) -> Optional[PromptArgument]:
        """Get argument by prompt and name"""
        pass

    @abstractmethod
    async def create(self, argument: PromptArgument) -> PromptArgument:
        """Create a new argument"""
        pass
