"""
List Organizations Use Case
"""

from typing import List

from src.app.services.policy import AccessContext, Entity, Operation, PolicyEngine, is_allowed
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import OrganizationInfo


class ListOrganizationsUseCase:
    """
    Organizations readable by the caller: every one for the super admin,
    otherwise those the caller belongs to plus public ones.
    Each entry carries the caller's role (None when not a member).
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[List[OrganizationInfo]]:
        async with self.uow:
            resolver = PolicyEngine.for_uow(self.uow).resolver
            is_super_admin = await resolver.is_super_admin(principal.user_id)
            if is_super_admin:
                organizations = await self.uow.organizations.list_all()
            else:
                organizations = await self.uow.organizations.list_visible_to(
                    principal.user_id
                )
            roles = await resolver.roles_of(principal.user_id)

            visible = []
            for organization in organizations:
                ctx = AccessContext(
                    is_super_admin=is_super_admin,
                    role=roles.get(organization.id),
                    is_public=organization.is_public,
                )
                if not is_allowed(Entity.organization, Operation.read, ctx):
                    continue
                visible.append(
                    OrganizationInfo(
                        id=str(organization.id),
                        name=organization.name,
                        is_public=organization.is_public,
                        role=ctx.role.value if ctx.role else None,
                        created_at=organization.created_at.isoformat(),
                    )
                )

            return Return.ok(visible)
