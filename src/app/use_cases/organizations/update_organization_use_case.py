"""
Update Organization Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.errors import not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import OrganizationInfo


class UpdateOrganizationUseCase:
    """
    Rename an organization or change its visibility.

    Business Rules:
    - Super admin or organization owner only
    - Name, when given, must not be blank
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        organization_id: UUID,
        name: Optional[str] = None,
        is_public: Optional[bool] = None,
    ) -> Result[OrganizationInfo]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)

            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id,
                Entity.organization,
                Operation.update,
                organization_id,
                is_public=organization is not None and organization.is_public,
            )
            if allowed.is_err():
                return allowed
            if organization is None:
                return Return.err(not_found("Organization not found"))

            if name is not None:
                name = name.strip()
                if not name:
                    return Return.err(validation_error("Organization name is required"))
                organization.name = name
            if is_public is not None:
                organization.is_public = is_public
            organization.updated_at = utcnow()

            await self.uow.organizations.update(organization)
            await self.uow.commit()

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
