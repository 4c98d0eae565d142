"""
Add Prompt Argument Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PromptArgument
from src.domain.errors import conflict, not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromptArgumentInfo


class AddPromptArgumentUseCase:
    """
    Declare a named argument on a prompt.

    Business Rules:
    - Caller must be admin or owner of the prompt's organization (or the super admin)
    - Argument names are unique per prompt
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        prompt_id: UUID,
        name: str,
        description: Optional[str] = None,
        required: bool = False,
    ) -> Result[PromptArgumentInfo]:
        async with self.uow:
            prompt = await self.uow.prompts.get_by_id(prompt_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.prompt_argument,
                Operation.create,
                prompt.organization_id if prompt else None,
            )
            if allowed.is_err():
                return allowed
            if prompt is None:
                return Return.err(not_found("Prompt not found"))

            name = (name or "").strip()
            if not name:
                return Return.err(validation_error("Argument name is required"))

            existing = await self.uow.prompt_arguments.get_by_prompt_and_name(
                prompt.id, name
            )
            if existing:
                return Return.err(conflict(f"Argument '{name}' already exists on this prompt"))

            argument = await self.uow.prompt_arguments.create(
                PromptArgument(
                    prompt_id=prompt.id,
                    name=name,
                    description=description,
                    required=required,
                )
            )
            await self.uow.commit()

            return Return.ok(PromptArgumentInfo.from_entity(argument))
