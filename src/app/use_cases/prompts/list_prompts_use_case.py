"""
List Prompts Use Case
"""

from typing import List
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import not_found
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromptInfo


class ListPromptsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, organization_id: UUID
    ) -> Result[List[PromptInfo]]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.prompt, Operation.read, organization_id
            )
            if allowed.is_err():
                return allowed

            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(not_found("Organization not found"))

            prompts = await self.uow.prompts.list_by_organization(organization_id)
            return Return.ok([PromptInfo.from_entity(p) for p in prompts])
