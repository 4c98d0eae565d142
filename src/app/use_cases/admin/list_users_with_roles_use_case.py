"""
List Users With Roles Use Case
"""

from collections import defaultdict
from typing import List

from src.app.services.policy import PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import UserOrganization, UserWithRoles


class ListUsersWithRolesUseCase:
    """
    Every known profile ordered by email, each with the organizations it
    belongs to. Super admin only.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[List[UserWithRoles]]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.require_super_admin(principal.user_id, "list users")
            if allowed.is_err():
                return allowed

            organizations_by_user = defaultdict(list)
            for membership, organization in await self.uow.memberships.list_with_organizations():
                organizations_by_user[membership.user_id].append(
                    UserOrganization(
                        organization_id=str(organization.id),
                        organization_name=organization.name,
                        role=membership.role.value,
                        is_public=organization.is_public,
                    )
                )

            return Return.ok(
                [
                    UserWithRoles(
                        user_id=str(profile.id),
                        email=profile.email,
                        display_name=profile.display_name or profile.email,
                        organizations=organizations_by_user.get(profile.id, []),
                    )
                    for profile in await self.uow.profiles.list_all()
                ]
            )
