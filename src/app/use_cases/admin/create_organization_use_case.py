"""
Create Organization Use Case

Creates an organization and makes the calling super admin its owner.
"""

import logging

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, Membership, Organization, OrganizationRole
from src.domain.errors import validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import CreateOrganizationResponse

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    """
    Use case for creating organizations.

    Business Rules:
    - Only the super admin can create organizations
    - Name must not be blank
    - The caller becomes owner of the new organization
    - Organization and owner membership are committed together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, name: str, is_public: bool = False
    ) -> Result[CreateOrganizationResponse]:
        """
        Execute create organization use case.

        Args:
            principal: Caller (must be the super admin)
            name: Organization name
            is_public: Whether non-members can see the organization

        Returns:
            Result with CreateOrganizationResponse DTO, or Error
        """
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.organization, Operation.create
            )
            if allowed.is_err():
                return allowed

            name = (name or "").strip()
            if not name:
                return Return.err(validation_error("Organization name is required"))

            organization = await self.uow.organizations.create(
                Organization(name=name, is_public=is_public)
            )

            await self.uow.memberships.create(
                Membership(
                    organization_id=organization.id,
                    user_id=principal.user_id,
                    role=OrganizationRole.owner,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization.id,
                    user_id=principal.user_id,
                    action="organization_created",
                    event_metadata={"name": name, "is_public": is_public},
                )
            )

            await self.uow.commit()

            logger.info("Organization %s (%s) created", organization.id, name)

            return Return.ok(
                CreateOrganizationResponse(
                    organization_id=str(organization.id),
                    name=organization.name,
                    is_public=organization.is_public,
                )
            )
