from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.services.policy import AccessContext, Entity, Operation, PolicyEngine, is_allowed
from src.app.services.role_resolver import RoleResolver
from src.domain.entities import Membership, OrganizationRole
from src.domain.errors import ErrorCode

SUPER_ADMIN = AccessContext(is_super_admin=True)
OUTSIDER = AccessContext()
VIEWER = AccessContext(role=OrganizationRole.viewer)
ADMIN = AccessContext(role=OrganizationRole.admin)
OWNER = AccessContext(role=OrganizationRole.owner)


# ============================================================================
# Organizations
# ============================================================================


def test_only_super_admin_creates_organizations():
    assert is_allowed(Entity.organization, Operation.create, SUPER_ADMIN)
    for ctx in (OUTSIDER, VIEWER, ADMIN, OWNER):
        assert not is_allowed(Entity.organization, Operation.create, ctx)


def test_organization_read_for_members_public_and_super_admin():
    assert is_allowed(Entity.organization, Operation.read, VIEWER)
    assert is_allowed(Entity.organization, Operation.read, SUPER_ADMIN)
    assert is_allowed(Entity.organization, Operation.read, AccessContext(is_public=True))
    assert not is_allowed(Entity.organization, Operation.read, OUTSIDER)


def test_organization_update_for_owner_and_super_admin():
    assert is_allowed(Entity.organization, Operation.update, OWNER)
    assert is_allowed(Entity.organization, Operation.update, SUPER_ADMIN)
    assert not is_allowed(Entity.organization, Operation.update, ADMIN)
    assert not is_allowed(Entity.organization, Operation.update, VIEWER)


def test_organization_delete_is_never_allowed():
    for ctx in (SUPER_ADMIN, OWNER, ADMIN, VIEWER, OUTSIDER):
        assert not is_allowed(Entity.organization, Operation.delete, ctx)


# ============================================================================
# Memberships
# ============================================================================


def test_membership_read_for_members():
    assert is_allowed(Entity.membership, Operation.read, VIEWER)
    assert is_allowed(Entity.membership, Operation.read, SUPER_ADMIN)
    assert not is_allowed(Entity.membership, Operation.read, OUTSIDER)


@pytest.mark.parametrize("operation", [Operation.create, Operation.update, Operation.delete])
def test_membership_writes_for_owner_and_super_admin(operation):
    assert is_allowed(Entity.membership, operation, OWNER)
    assert is_allowed(Entity.membership, operation, SUPER_ADMIN)
    assert not is_allowed(Entity.membership, operation, ADMIN)
    assert not is_allowed(Entity.membership, operation, VIEWER)


# ============================================================================
# Prompts
# ============================================================================


def test_prompt_read_requires_membership():
    assert is_allowed(Entity.prompt, Operation.read, VIEWER)
    assert not is_allowed(Entity.prompt, Operation.read, OUTSIDER)
    assert not is_allowed(Entity.prompt, Operation.read, AccessContext(is_public=True))


def test_prompt_create_requires_editor_and_caller_as_creator():
    assert is_allowed(
        Entity.prompt, Operation.create, AccessContext(role=OrganizationRole.admin, is_creator=True)
    )
    assert is_allowed(
        Entity.prompt, Operation.create, AccessContext(is_super_admin=True, is_creator=True)
    )
    assert not is_allowed(Entity.prompt, Operation.create, ADMIN)
    assert not is_allowed(
        Entity.prompt, Operation.create, AccessContext(role=OrganizationRole.viewer, is_creator=True)
    )


@pytest.mark.parametrize("entity", [Entity.prompt, Entity.prompt_variant, Entity.prompt_argument])
@pytest.mark.parametrize("operation", [Operation.update, Operation.delete])
def test_prompt_family_writes_for_editors(entity, operation):
    assert is_allowed(entity, operation, ADMIN)
    assert is_allowed(entity, operation, OWNER)
    assert is_allowed(entity, operation, SUPER_ADMIN)
    assert not is_allowed(entity, operation, VIEWER)
    assert not is_allowed(entity, operation, OUTSIDER)


def test_variant_create_does_not_need_creator_flag():
    assert is_allowed(Entity.prompt_variant, Operation.create, ADMIN)
    assert not is_allowed(Entity.prompt_variant, Operation.create, VIEWER)


# ============================================================================
# Invitations and API keys
# ============================================================================


@pytest.mark.parametrize("operation", list(Operation))
def test_invitations_are_super_admin_only(operation):
    assert is_allowed(Entity.invitation, operation, SUPER_ADMIN)
    assert not is_allowed(Entity.invitation, operation, OWNER)


@pytest.mark.parametrize("operation", list(Operation))
def test_api_keys_are_owner_only_without_super_admin_override(operation):
    assert is_allowed(Entity.api_key, operation, AccessContext(is_owner=True))
    assert not is_allowed(Entity.api_key, operation, SUPER_ADMIN)
    assert not is_allowed(Entity.api_key, operation, OWNER)


# ============================================================================
# PolicyEngine
# ============================================================================


def _engine(membership=None, super_admin=False):
    memberships = AsyncMock()
    memberships.get_by_user_and_organization.return_value = membership
    memberships.exists_with_role.return_value = super_admin
    return PolicyEngine(RoleResolver(memberships)), memberships


@pytest.mark.asyncio
async def test_authorize_returns_context_for_allowed_caller():
    user_id, org_id = uuid4(), uuid4()
    engine, _ = _engine(
        Membership(organization_id=org_id, user_id=user_id, role=OrganizationRole.admin)
    )

    result = await engine.authorize(user_id, Entity.prompt, Operation.update, org_id)

    assert result.is_ok()
    assert result.value.role is OrganizationRole.admin
    assert result.value.is_super_admin is False


@pytest.mark.asyncio
async def test_authorize_denies_with_permission_denied():
    engine, _ = _engine()

    result = await engine.authorize(uuid4(), Entity.prompt, Operation.update, uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.PERMISSION_DENIED.value
    assert "update this prompt" in result.error.message


@pytest.mark.asyncio
async def test_authorize_without_organization_skips_role_lookup():
    engine, memberships = _engine(super_admin=True)

    result = await engine.authorize(uuid4(), Entity.invitation, Operation.create)

    assert result.is_ok()
    memberships.get_by_user_and_organization.assert_not_called()


@pytest.mark.asyncio
async def test_require_super_admin():
    engine, _ = _engine(super_admin=False)
    denied = await engine.require_super_admin(uuid4(), "list users")
    assert denied.is_err()
    assert denied.error.message == "Only the super admin can list users"

    engine, _ = _engine(super_admin=True)
    assert (await engine.require_super_admin(uuid4(), "list users")).is_ok()
