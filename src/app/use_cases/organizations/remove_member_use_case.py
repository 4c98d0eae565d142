"""
Remove Member Use Case
"""

from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, OrganizationRole
from src.domain.errors import conflict, not_found
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Remove a user from an organization.

    Business Rules:
    - Super admin or organization owner only
    - The super_admin membership cannot be removed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, organization_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.membership, Operation.delete, organization_id
            )
            if allowed.is_err():
                return allowed

            membership = await self.uow.memberships.get_by_user_and_organization(
                target_user_id, organization_id
            )
            if membership is None:
                return Return.err(not_found("User is not a member of this organization"))

            if membership.role == OrganizationRole.super_admin:
                return Return.err(conflict("The super admin membership cannot be removed"))

            await self.uow.memberships.delete(membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization_id,
                    user_id=principal.user_id,
                    action="member_removed",
                    event_metadata={"target_user_id": str(target_user_id)},
                )
            )
            await self.uow.commit()

            return Return.ok(RemoveMemberResponse(status="removed"))
