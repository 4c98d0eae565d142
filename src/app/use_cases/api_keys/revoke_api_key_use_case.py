"""
Revoke API Key Use Case
"""

import logging
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.errors import conflict
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import ApiKeyInfo

logger = logging.getLogger(__name__)


class RevokeApiKeyUseCase:
    """
    Revoke an API key.

    Business Rules:
    - Only the owning user may revoke; the super admin has no override
    - Unknown ids are denied like keys of other users
    - Revoked keys are kept with revoked_at set
    - Revoking twice is a CONFLICT
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, api_key_id: UUID) -> Result[ApiKeyInfo]:
        async with self.uow:
            api_key = await self.uow.api_keys.get_by_id(api_key_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.api_key,
                Operation.delete,
                is_owner=api_key is not None and api_key.user_id == principal.user_id,
            )
            if allowed.is_err():
                return allowed

            if api_key.revoked_at is not None:
                return Return.err(conflict("API key is already revoked"))

            api_key.revoked_at = utcnow()
            api_key = await self.uow.api_keys.update(api_key)
            await self.uow.commit()

            logger.info("API key %s revoked", api_key_id)

            return Return.ok(ApiKeyInfo.from_entity(api_key))
