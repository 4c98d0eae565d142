"""
Change Member Role Use Case

Handles changing a member's role within an organization.
"""

import logging
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ASSIGNABLE_ROLES, AuditEvent, OrganizationRole
from src.domain.errors import conflict, not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import MemberInfo

logger = logging.getLogger(__name__)


class ChangeMemberRoleUseCase:
    """
    Use case for changing a member's role within an organization.

    Business Rules:
    - Super admin or organization owner only
    - New role must be viewer, admin or owner
    - Target user must be a member
    - The super_admin membership cannot be changed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        organization_id: UUID,
        target_user_id: UUID,
        new_role: str,
    ) -> Result[MemberInfo]:
        """
        Execute change role use case.

        Args:
            principal: Caller making the change
            organization_id: Organization ID
            target_user_id: User whose role is being changed
            new_role: New role to assign (viewer/admin/owner)

        Returns:
            Result with updated membership info, or Error
        """
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.membership, Operation.update, organization_id
            )
            if allowed.is_err():
                return allowed

            try:
                role = OrganizationRole(new_role)
            except ValueError:
                role = None
            if role not in ASSIGNABLE_ROLES:
                return Return.err(
                    validation_error(
                        f"Invalid role: {new_role}. Must be one of: viewer, admin, owner"
                    )
                )

            membership = await self.uow.memberships.get_by_user_and_organization(
                target_user_id, organization_id
            )
            if membership is None:
                return Return.err(not_found("User is not a member of this organization"))

            if membership.role == OrganizationRole.super_admin:
                return Return.err(conflict("The super admin membership cannot be changed"))

            previous_role = OrganizationRole(membership.role)
            membership.role = role
            await self.uow.memberships.update(membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization_id,
                    user_id=principal.user_id,
                    action="role_changed",
                    event_metadata={
                        "target_user_id": str(target_user_id),
                        "previous_role": previous_role.value,
                        "new_role": role.value,
                    },
                )
            )
            await self.uow.commit()

            logger.info(
                "Role of %s in %s changed %s -> %s",
                target_user_id,
                organization_id,
                previous_role.value,
                role.value,
            )

            return Return.ok(
                MemberInfo(
                    user_id=str(membership.user_id),
                    role=role.value,
                    created_at=membership.created_at.isoformat(),
                )
            )
