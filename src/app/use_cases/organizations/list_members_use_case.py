"""
List Members Use Case
"""

from typing import List
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import not_found
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import MemberInfo


class ListMembersUseCase:
    """Members of an organization; visible to its members and the super admin"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, organization_id: UUID
    ) -> Result[List[MemberInfo]]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.membership, Operation.read, organization_id
            )
            if allowed.is_err():
                return allowed

            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(not_found("Organization not found"))

            memberships = await self.uow.memberships.get_by_organization_id(
                organization_id
            )
            return Return.ok(
                [
                    MemberInfo(
                        user_id=str(membership.user_id),
                        role=membership.role.value,
                        created_at=membership.created_at.isoformat(),
                    )
                    for membership in memberships
                ]
            )
