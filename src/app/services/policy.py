"""
Policy Engine

Authorization predicates for every (entity, operation) pair.

``is_allowed`` is a pure function over an ``AccessContext`` so the rule
table can be tested without a database. ``PolicyEngine`` gathers the
context for a caller through the RoleResolver and turns a denial into a
PERMISSION_DENIED error. Use cases authorize before their first write.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from src.app.services.role_resolver import RoleResolver
from src.domain.entities import EDITOR_ROLES, OrganizationRole
from src.domain.errors import permission_denied
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class Entity(str, Enum):
    organization = "organization"
    membership = "membership"
    prompt = "prompt"
    prompt_variant = "prompt_variant"
    prompt_argument = "prompt_argument"
    invitation = "invitation"
    api_key = "api_key"


class Operation(str, Enum):
    create = "create"
    read = "read"
    update = "update"
    delete = "delete"


@dataclass(frozen=True)
class AccessContext:
    """
    Facts about the caller relative to the target row.

    Attributes:
        is_super_admin: caller holds the global super admin capability
        role: caller's role in the target (or parent prompt's) organization
        is_public: target organization is public
        is_creator: caller is the declared creator of the row being created
        is_owner: caller owns the target row (API keys)
    """

    is_super_admin: bool = False
    role: Optional[OrganizationRole] = None
    is_public: bool = False
    is_creator: bool = False
    is_owner: bool = False

    @property
    def is_member(self) -> bool:
        return self.role is not None

    @property
    def is_editor(self) -> bool:
        return self.role in EDITOR_ROLES


def is_allowed(entity: Entity, operation: Operation, ctx: AccessContext) -> bool:
    if entity is Entity.api_key:
        # No super admin override
        return ctx.is_owner

    if entity is Entity.invitation:
        return ctx.is_super_admin

    if entity is Entity.organization:
        if operation is Operation.create:
            return ctx.is_super_admin
        if operation is Operation.read:
            return ctx.is_super_admin or ctx.is_member or ctx.is_public
        if operation is Operation.update:
            return ctx.is_super_admin or ctx.role is OrganizationRole.owner
        # Organizations are never deleted
        return False

    if entity is Entity.membership:
        if operation is Operation.read:
            return ctx.is_super_admin or ctx.is_member
        return ctx.is_super_admin or ctx.role is OrganizationRole.owner

    if entity is Entity.prompt:
        if operation is Operation.read:
            return ctx.is_member
        if operation is Operation.create:
            return (ctx.is_super_admin or ctx.is_editor) and ctx.is_creator
        return ctx.is_super_admin or ctx.is_editor

    if entity in (Entity.prompt_variant, Entity.prompt_argument):
        if operation is Operation.read:
            return ctx.is_member
        return ctx.is_super_admin or ctx.is_editor

    return False


class PolicyEngine:
    def __init__(self, resolver: RoleResolver):
        self.resolver = resolver

    @classmethod
    def for_uow(cls, uow) -> "PolicyEngine":
        return cls(RoleResolver(uow.memberships))

    async def context_for(
        self,
        user_id: UUID,
        organization_id: Optional[UUID] = None,
        *,
        is_public: bool = False,
        is_creator: bool = False,
        is_owner: bool = False,
    ) -> AccessContext:
        role = None
        if organization_id is not None:
            role = await self.resolver.role_of(user_id, organization_id)
        return AccessContext(
            is_super_admin=await self.resolver.is_super_admin(user_id),
            role=role,
            is_public=is_public,
            is_creator=is_creator,
            is_owner=is_owner,
        )

    async def authorize(
        self,
        user_id: UUID,
        entity: Entity,
        operation: Operation,
        organization_id: Optional[UUID] = None,
        **facts,
    ) -> Result[AccessContext]:
        """
        Evaluate the rule for ``entity``/``operation`` for the caller.

        Returns:
            Result with the AccessContext used for the decision, or a
            PERMISSION_DENIED Error
        """
        ctx = await self.context_for(user_id, organization_id, **facts)
        if is_allowed(entity, operation, ctx):
            return Return.ok(ctx)

        logger.info(
            "Denied %s on %s for user %s (org=%s)",
            operation.value,
            entity.value,
            user_id,
            organization_id,
        )
        return Return.err(
            permission_denied(
                f"You do not have permission to {operation.value} this {entity.value.replace('_', ' ')}"
            )
        )

    async def require_super_admin(self, user_id: UUID, action: str) -> Result[None]:
        """Entry gate for administrative commands"""
        if await self.resolver.is_super_admin(user_id):
            return Return.ok(None)
        logger.info("Denied super admin command %s for user %s", action, user_id)
        return Return.err(permission_denied(f"Only the super admin can {action}"))
