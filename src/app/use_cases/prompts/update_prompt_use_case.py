"""
Update Prompt Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.errors import conflict, not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromptInfo


class UpdatePromptUseCase:
    """
    Update a prompt's name or description.

    Business Rules:
    - Caller must be admin or owner of the prompt's organization (or the super admin)
    - A new name must stay unique within the organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        prompt_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Result[PromptInfo]:
        async with self.uow:
            prompt = await self.uow.prompts.get_by_id(prompt_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.prompt,
                Operation.update,
                prompt.organization_id if prompt else None,
            )
            if allowed.is_err():
                return allowed
            if prompt is None:
                return Return.err(not_found("Prompt not found"))

            if name is not None:
                name = name.strip()
                if not name:
                    return Return.err(validation_error("Prompt name is required"))
                if name != prompt.name:
                    existing = await self.uow.prompts.get_by_organization_and_name(
                        prompt.organization_id, name
                    )
                    if existing:
                        return Return.err(
                            conflict(
                                f"A prompt named '{name}' already exists in this organization"
                            )
                        )
                prompt.name = name
            if description is not None:
                prompt.description = description
            prompt.updated_at = utcnow()

            prompt = await self.uow.prompts.update(prompt)
            await self.uow.commit()

            return Return.ok(PromptInfo.from_entity(prompt))
