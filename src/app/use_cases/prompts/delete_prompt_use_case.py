"""
Delete Prompt Use Case
"""

import logging
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import not_found
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import DeletePromptResponse

logger = logging.getLogger(__name__)


class DeletePromptUseCase:
    """Delete a prompt together with its variants and arguments"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, prompt_id: UUID
    ) -> Result[DeletePromptResponse]:
        async with self.uow:
            prompt = await self.uow.prompts.get_by_id(prompt_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.prompt,
                Operation.delete,
                prompt.organization_id if prompt else None,
            )
            if allowed.is_err():
                return allowed
            if prompt is None:
                return Return.err(not_found("Prompt not found"))

            await self.uow.prompts.delete(prompt)
            await self.uow.commit()

            logger.info("Prompt %s deleted by %s", prompt_id, principal.user_id)

            return Return.ok(DeletePromptResponse(status="deleted"))
