"""
Prompt Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Prompt, PromptArgument, PromptVariant


class PromptVariantInfo(BaseModel):
    id: str
    prompt_id: str
    content: str
    notes: Optional[str]
    is_default: bool
    created_by: str
    created_at: str

    @classmethod
    def from_entity(cls, variant: PromptVariant) -> "PromptVariantInfo":
        return cls(
            id=str(variant.id),
            prompt_id=str(variant.prompt_id),
            content=variant.content,
            notes=variant.notes,
            is_default=variant.is_default,
            created_by=str(variant.created_by),
            created_at=variant.created_at.isoformat(),
        )


class PromptArgumentInfo(BaseModel):
    id: str
    prompt_id: str
    name: str
    description: Optional[str]
    required: bool

    @classmethod
    def from_entity(cls, argument: PromptArgument) -> "PromptArgumentInfo":
        return cls(
            id=str(argument.id),
            prompt_id=str(argument.prompt_id),
            name=argument.name,
            description=argument.description,
            required=argument.required,
        )


class PromptInfo(BaseModel):
    """Prompt summary"""

    id: str
    organization_id: str
    name: str
    description: Optional[str]
    creator_id: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, prompt: Prompt) -> "PromptInfo":
        return cls(
            id=str(prompt.id),
            organization_id=str(prompt.organization_id),
            name=prompt.name,
            description=prompt.description,
            creator_id=str(prompt.creator_id),
            created_at=prompt.created_at.isoformat(),
            updated_at=prompt.updated_at.isoformat(),
        )


class PromptDetail(PromptInfo):
    """Prompt with its variants and arguments"""

    variants: List[PromptVariantInfo] = []
    arguments: List[PromptArgumentInfo] = []


class DeletePromptResponse(BaseModel):
    status: str
