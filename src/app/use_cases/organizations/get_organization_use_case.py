"""
Get Organization Use Case
"""

from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import not_found
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import OrganizationInfo


class GetOrganizationUseCase:
    """Readable by its members, the super admin, and anyone when public"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, organization_id: UUID
    ) -> Result[OrganizationInfo]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.organization,
                Operation.read,
                organization_id,
                is_public=organization is not None and organization.is_public,
            )
            if allowed.is_err():
                return allowed
            if organization is None:
                return Return.err(not_found("Organization not found"))

            role = allowed.value.role
            return Return.ok(
                OrganizationInfo(
                    id=str(organization.id),
                    name=organization.name,
                    is_public=organization.is_public,
                    role=role.value if role else None,
                    created_at=organization.created_at.isoformat(),
                )
            )
