"""
Add Prompt Variant Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PromptVariant
from src.domain.errors import not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromptVariantInfo


class AddPromptVariantUseCase:
    """
    Add a variant to a prompt.

    Business Rules:
    - Caller must be admin or owner of the prompt's organization (or the super admin)
    - Content must not be blank
    - At most one default variant per prompt; a new default replaces the old one
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        prompt_id: UUID,
        content: str,
        notes: Optional[str] = None,
        is_default: bool = False,
    ) -> Result[PromptVariantInfo]:
        async with self.uow:
            prompt = await self.uow.prompts.get_by_id(prompt_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.prompt_variant,
                Operation.create,
                prompt.organization_id if prompt else None,
            )
            if allowed.is_err():
                return allowed
            if prompt is None:
                return Return.err(not_found("Prompt not found"))

            if not (content or "").strip():
                return Return.err(validation_error("Variant content is required"))

            if is_default:
                await self.uow.prompt_variants.clear_default(prompt.id)

            variant = await self.uow.prompt_variants.create(
                PromptVariant(
                    prompt_id=prompt.id,
                    content=content,
                    notes=notes,
                    is_default=is_default,
                    created_by=principal.user_id,
                )
            )
            await self.uow.commit()

            return Return.ok(PromptVariantInfo.from_entity(variant))
