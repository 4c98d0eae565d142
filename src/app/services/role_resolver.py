"""
Role Resolver

Side-effect-free membership lookups. Every policy decision goes through
these questions, and they read memberships directly rather than
through the policy engine, so a caller can always resolve its own role.
"""

from typing import Dict, Optional
from uuid import UUID

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import OrganizationRole


class RoleResolver:
    def __init__(self, memberships: IMembershipRepository):
        self.memberships = memberships

    async def role_of(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[OrganizationRole]:
        """Effective role of a user in an organization, None when not a member"""
        membership = await self.memberships.get_by_user_and_organization(
            user_id, organization_id
        )
        if membership is None:
            return None
        return OrganizationRole(membership.role)

    async def roles_of(self, user_id: UUID) -> Dict[UUID, OrganizationRole]:
        """Every role of a user keyed by organization, in one lookup"""
        memberships = await self.memberships.get_by_user_id(user_id)
        return {m.organization_id: OrganizationRole(m.role) for m in memberships}

    async def is_member(self, user_id: UUID, organization_id: UUID) -> bool:
        return await self.role_of(user_id, organization_id) is not None

    async def is_super_admin(self, user_id: UUID) -> bool:
        """
        Super admin status is stored on a single membership row but is a
        global capability: it applies to every organization.
        """
        return await self.memberships.exists_with_role(
            user_id, OrganizationRole.super_admin
        )
