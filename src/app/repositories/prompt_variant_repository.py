from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import PromptVariant


class IPromptVariantRepository(ABC):
    """PromptVariant repository interface - application layer"""

    @abstractmethod
    async def list_by_prompt(self, prompt_id: UUID) -> List[PromptVariant]:
        """Get variants of a prompt, oldest first"""
        pass

    @abstractmethod
    async def clear_default(self, prompt_id: UUID) -> None:
        """Unset is_default on every variant of a prompt"""
        pass

    @abstractmethod
    async def create(self, variant: PromptVariant) -> PromptVariant:
        """Create a new variant"""
        pass
