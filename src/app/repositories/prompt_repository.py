from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Prompt


class IPromptRepository(ABC):
    """Prompt repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, prompt_id: UUID) -> Optional[Prompt]:
        """Get prompt by ID"""
        pass

    @abstractmethod
    async def get_by_organization_and_name(
        self, organization_id: UUID, name: str
    ) -> Optional[Prompt]:
        """Get prompt by organization and name"""
        pass

    @abstractmethod
    async def list_by_organization(self, organization_id: UUID) -> List[Prompt]:
        """Get all prompts of an organization, newest first"""
        pass

    @abstractmethod
    async def create(self, prompt: Prompt) -> Prompt:
        """Create a new prompt"""
        pass

    @abstractmethod
    async def update(self, prompt: Prompt) -> Prompt:
        """Update existing prompt"""
        pass

    @abstractmethod
    async def delete(self, prompt: Prompt) -> None:
        """Delete a prompt with its variants and arguments"""
        pass
