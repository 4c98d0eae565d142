"""
Create API Key Use Case

Issues a personal API key scoped to one organization.
"""

import logging
import secrets
from uuid import UUID

import bcrypt

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApiKey
from src.domain.errors import permission_denied, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import ApiKeyInfo, CreateApiKeyResponse

logger = logging.getLogger(__name__)

API_KEY_PREFIX = "pm_"
# Stored in clear to find the row for a presented key
KEY_PREFIX_LENGTH = 12


def generate_api_key() -> str:
    return API_KEY_PREFIX + secrets.token_urlsafe(32)


def hash_api_key(key: str) -> str:
    """Hash an API key using bcrypt (cost 12)"""
    return bcrypt.hashpw(key.encode(), bcrypt.gensalt(12)).decode()


def verify_api_key(key: str, key_hash: str) -> bool:
    """Check a presented key against its stored bcrypt hash"""
    return bcrypt.checkpw(key.encode(), key_hash.encode())


class CreateApiKeyUseCase:
    """
    Use case for issuing API keys.

    Business Rules:
    - Keys belong to the caller and no one else
    - Organization must exist and the caller must be a member of it
    - Only a bcrypt hash and the first KEY_PREFIX_LENGTH characters are
      stored; plaintext is returned once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, organization_id: UUID, name: str
    ) -> Result[CreateApiKeyResponse]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.api_key,
                Operation.create,
                organization_id,
                is_owner=True,
            )
            if allowed.is_err():
                return allowed

            name = (name or "").strip()
            if not name:
                return Return.err(validation_error("API key name is required"))

            # An unknown organization has no members
            if not allowed.value.is_member:
                return Return.err(
                    permission_denied("You must be a member of the organization")
                )

            key = generate_api_key()
            api_key = await self.uow.api_keys.create(
                ApiKey(
                    user_id=principal.user_id,
                    organization_id=organization_id,
                    name=name,
                    key_prefix=key[:KEY_PREFIX_LENGTH],
                    key_hash=hash_api_key(key),
                )
            )
            await self.uow.commit()

            logger.info("API key %s issued to %s", api_key.id, principal.user_id)

            return Return.ok(
                CreateApiKeyResponse(
                    **ApiKeyInfo.from_entity(api_key).model_dump(),
                    key=key,
                )
            )
