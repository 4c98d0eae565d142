"""
Prompt Use Cases

Policy-gated management of prompts, their variants and arguments.
"""

from .add_prompt_argument_use_case import AddPromptArgumentUseCase
from .add_prompt_variant_use_case import AddPromptVariantUseCase
from .create_prompt_use_case import CreatePromptUseCase
from .delete_prompt_use_case import DeletePromptUseCase
from .dtos import (
    DeletePromptResponse,
    PromptArgumentInfo,
    PromptDetail,
    PromptInfo,
    PromptVariantInfo,
)
from .get_prompt_use_case import GetPromptUseCase
from .list_prompts_use_case import ListPromptsUseCase
from .update_prompt_use_case import UpdatePromptUseCase

__all__ = [
    "CreatePromptUseCase",
    "GetPromptUseCase",
    "ListPromptsUseCase",
    "UpdatePromptUseCase",
    "DeletePromptUseCase",
    "AddPromptVariantUseCase",
    "AddPromptArgumentUseCase",
    "PromptInfo",
    "PromptDetail",
    "PromptVariantInfo",
    "PromptArgumentInfo",
    "DeletePromptResponse",
]
