"""
Get Prompt Use Case
"""

from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import not_found
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromptArgumentInfo, PromptDetail, PromptInfo, PromptVariantInfo


class GetPromptUseCase:
    """Fetch a prompt with its variants and arguments. Members only."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, prompt_id: UUID) -> Result[PromptDetail]:
        async with self.uow:
            prompt = await self.uow.prompts.get_by_id(prompt_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.prompt,
                Operation.read,
                prompt.organization_id if prompt else None,
            )
            if allowed.is_err():
                return allowed
            if prompt is None:
                return Return.err(not_found("Prompt not found"))

            variants = await self.uow.prompt_variants.list_by_prompt(prompt.id)
            arguments = await self.uow.prompt_arguments.list_by_prompt(prompt.id)

            return Return.ok(
                PromptDetail(
                    **PromptInfo.from_entity(prompt).model_dump(),
                    variants=[PromptVariantInfo.from_entity(v) for v in variants],
                    arguments=[PromptArgumentInfo.from_entity(a) for a in arguments],
                )
            )
