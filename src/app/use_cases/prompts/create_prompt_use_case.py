"""
Create Prompt Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Prompt
from src.domain.errors import conflict, not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromptInfo

logger = logging.getLogger(__name__)


class CreatePromptUseCase:
    """
    Use case for creating prompts.

    Business Rules:
    - Caller must be admin or owner of the organization (or the super admin)
    - creator_id, when supplied, must be the caller
    - Name must be unique within the organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        organization_id: UUID,
        name: str,
        description: Optional[str] = None,
        creator_id: Optional[UUID] = None,
    ) -> Result[PromptInfo]:
        if creator_id is None:
            creator_id = principal.user_id

        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.prompt,
                Operation.create,
                organization_id,
                is_creator=creator_id == principal.user_id,
            )
            if allowed.is_err():
                return allowed

            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(not_found("Organization not found"))

            name = (name or "").strip()
            if not name:
                return Return.err(validation_error("Prompt name is required"))

            existing = await self.uow.prompts.get_by_organization_and_name(
                organization_id, name
            )
            if existing:
                return Return.err(
                    conflict(f"A prompt named '{name}' already exists in this organization")
                )

            prompt = await self.uow.prompts.create(
                Prompt(
                    organization_id=organization_id,
                    name=name,
                    description=description,
                    creator_id=creator_id,
                )
            )
            await self.uow.commit()

            logger.info("Prompt %s created in %s", prompt.id, organization_id)

            return Return.ok(PromptInfo.from_entity(prompt))
