"""
Promote User To Owner Use Case
"""

import logging
from uuid import UUID

from src.app.services.policy import PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, OrganizationRole
from src.domain.errors import conflict
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PromoteUserResponse

logger = logging.getLogger(__name__)


class PromoteUserToOwnerUseCase:
    """
    Use case for granting owner on an existing membership.

    Business Rules:
    - Only the super admin can promote
    - No membership for (user, organization) -> promoted=False, no error
    - The super admin's own super_admin membership cannot be rewritten (CONFLICT)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, user_id: UUID, organization_id: UUID
    ) -> Result[PromoteUserResponse]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.require_super_admin(
                principal.user_id, "promote users"
            )
            if allowed.is_err():
                return allowed

            membership = await self.uow.memberships.get_by_user_and_organization(
                user_id, organization_id
            )
            if membership is None:
                return Return.ok(PromoteUserResponse(promoted=False))

            if membership.role == OrganizationRole.super_admin:
                return Return.err(
                    conflict("The super admin membership cannot be changed")
                )

            previous_role = membership.role
            membership.role = OrganizationRole.owner
            await self.uow.memberships.update(membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization_id,
                    user_id=principal.user_id,
                    action="member_promoted",
                    event_metadata={
                        "target_user_id": str(user_id),
                        "previous_role": OrganizationRole(previous_role).value,
                    },
                )
            )
            await self.uow.commit()

            logger.info("User %s promoted to owner of %s", user_id, organization_id)
            return Return.ok(PromoteUserResponse(promoted=True))
