"""
List API Keys Use Case
"""

from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import ApiKeyInfo


class ListApiKeysUseCase:
    """The caller's own keys, newest first. Keys of other users are never listed."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[List[ApiKeyInfo]]:
        async with self.uow:
            api_keys = await self.uow.api_keys.list_by_user(principal.user_id)
            return Return.ok([ApiKeyInfo.from_entity(k) for k in api_keys])
