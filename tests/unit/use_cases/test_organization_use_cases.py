from uuid import uuid4

import pytest

from src.app.use_cases.organizations import (
    ChangeMemberRoleUseCase,
    GetOrganizationUseCase,
    ListMembersUseCase,
    ListOrganizationsUseCase,
    RemoveMemberUseCase,
    UpdateOrganizationUseCase,
)
from src.domain.entities import Membership, Organization, OrganizationRole
from src.domain.errors import ErrorCode


def _membership(user_id, organization_id, role):
    return Membership(organization_id=organization_id, user_id=user_id, role=role)


# ============================================================================
# Visibility
# ============================================================================


@pytest.mark.asyncio
async def test_list_organizations_includes_role(mock_uow, principal):
    acme = Organization(id=uuid4(), name="Acme")
    public = Organization(id=uuid4(), name="Public Organization", is_public=True)
    mock_uow.organizations.list_visible_to.return_value = [acme, public]

    mock_uow.memberships.get_by_user_id.return_value = [
        _membership(principal.user_id, acme.id, OrganizationRole.admin)
    ]

    result = await ListOrganizationsUseCase(mock_uow).execute(principal)

    assert result.is_ok()
    assert [(o.name, o.role) for o in result.value] == [
        ("Acme", "admin"),
        ("Public Organization", None),
    ]
    mock_uow.organizations.list_all.assert_not_called()


@pytest.mark.asyncio
async def test_list_organizations_resolves_roles_once(mock_uow, principal):
    organizations = [Organization(id=uuid4(), name=f"Org {i}", is_public=True) for i in range(5)]
    mock_uow.organizations.list_visible_to.return_value = organizations

    result = await ListOrganizationsUseCase(mock_uow).execute(principal)

    assert len(result.value) == 5
    mock_uow.memberships.exists_with_role.assert_called_once()
    mock_uow.memberships.get_by_user_id.assert_called_once_with(principal.user_id)
    mock_uow.memberships.get_by_user_and_organization.assert_not_called()


@pytest.mark.asyncio
async def test_super_admin_lists_all_organizations(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.organizations.list_all.return_value = [Organization(id=uuid4(), name="Hidden")]

    result = await ListOrganizationsUseCase(mock_uow).execute(principal)

    assert [o.name for o in result.value] == ["Hidden"]
    mock_uow.organizations.list_visible_to.assert_not_called()


@pytest.mark.asyncio
async def test_private_organization_hidden_from_outsider(mock_uow, principal):
    mock_uow.organizations.get_by_id.return_value = Organization(id=uuid4(), name="Acme")

    result = await GetOrganizationUseCase(mock_uow).execute(principal, uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.PERMISSION_DENIED.value


@pytest.mark.asyncio
async def test_public_organization_readable_by_anyone(mock_uow, principal):
    org = Organization(id=uuid4(), name="Public Organization", is_public=True)
    mock_uow.organizations.get_by_id.return_value = org

    result = await GetOrganizationUseCase(mock_uow).execute(principal, org.id)

    assert result.is_ok()
    assert result.value.role is None


# ============================================================================
# UpdateOrganizationUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_owner_renames_organization(mock_uow, principal):
    org = Organization(id=uuid4(), name="Acme")
    mock_uow.organizations.get_by_id.return_value = org
    mock_uow.memberships.get_by_user_and_organization.return_value = _membership(
        principal.user_id, org.id, OrganizationRole.owner
    )

    result = await UpdateOrganizationUseCase(mock_uow).execute(principal, org.id, name="Acme Inc")

    assert result.is_ok()
    assert result.value.name == "Acme Inc"
    mock_uow.organizations.update.assert_called_once_with(org)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_cannot_update_organization(mock_uow, principal):
    org = Organization(id=uuid4(), name="Acme")
    mock_uow.organizations.get_by_id.return_value = org
    mock_uow.memberships.get_by_user_and_organization.return_value = _membership(
        principal.user_id, org.id, OrganizationRole.admin
    )

    result = await UpdateOrganizationUseCase(mock_uow).execute(principal, org.id, name="X")

    assert result.is_err()
    assert result.error.code == ErrorCode.PERMISSION_DENIED.value
    assert org.name == "Acme"
    mock_uow.organizations.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_unknown_organization(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.organizations.get_by_id.return_value = None

    result = await UpdateOrganizationUseCase(mock_uow).execute(principal, uuid4(), name="X")

    assert result.error.code == ErrorCode.NOT_FOUND.value


@pytest.mark.asyncio
async def test_outsider_gets_same_denial_for_unknown_organizations(mock_uow, principal):
    mock_uow.organizations.get_by_id.return_value = None

    updated = await UpdateOrganizationUseCase(mock_uow).execute(principal, uuid4(), name="X")
    members = await ListMembersUseCase(mock_uow).execute(principal, uuid4())

    assert updated.error.code == ErrorCode.PERMISSION_DENIED.value
    assert members.error.code == ErrorCode.PERMISSION_DENIED.value


# ============================================================================
# Members
# ============================================================================


@pytest.mark.asyncio
async def test_members_listed_for_member(mock_uow, principal):
    org_id = uuid4()
    mock_uow.organizations.get_by_id.return_value = Organization(id=org_id, name="Acme")
    own = _membership(principal.user_id, org_id, OrganizationRole.viewer)
    mock_uow.memberships.get_by_user_and_organization.return_value = own
    mock_uow.memberships.get_by_organization_id.return_value = [own]

    result = await ListMembersUseCase(mock_uow).execute(principal, org_id)

    assert result.is_ok()
    assert [m.role for m in result.value] == ["viewer"]


@pytest.mark.asyncio
async def test_owner_changes_member_role(mock_uow, principal):
    org_id, target_id = uuid4(), uuid4()
    caller = _membership(principal.user_id, org_id, OrganizationRole.owner)
    target = _membership(target_id, org_id, OrganizationRole.viewer)

    async def lookup(user_id, organization_id):
        return caller if user_id == principal.user_id else target

    mock_uow.memberships.get_by_user_and_organization.side_effect = lookup

    result = await ChangeMemberRoleUseCase(mock_uow).execute(
        principal, org_id, target_id, "admin"
    )

    assert result.is_ok()
    assert result.value.role == "admin"
    assert target.role == OrganizationRole.admin
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_role_change_cannot_grant_super_admin(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await ChangeMemberRoleUseCase(mock_uow).execute(
        principal, uuid4(), uuid4(), "super_admin"
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR.value
    mock_uow.memberships.update.assert_not_called()


@pytest.mark.asyncio
async def test_super_admin_membership_cannot_be_changed_or_removed(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.memberships.get_by_user_and_organization.return_value = _membership(
        uuid4(), uuid4(), OrganizationRole.super_admin
    )

    changed = await ChangeMemberRoleUseCase(mock_uow).execute(
        principal, uuid4(), uuid4(), "viewer"
    )
    removed = await RemoveMemberUseCase(mock_uow).execute(principal, uuid4(), uuid4())

    assert changed.error.code == ErrorCode.CONFLICT.value
    assert removed.error.code == ErrorCode.CONFLICT.value
    mock_uow.memberships.update.assert_not_called()
    mock_uow.memberships.delete.assert_not_called()


@pytest.mark.asyncio
async def test_viewer_cannot_remove_members(mock_uow, principal):
    org_id = uuid4()
    mock_uow.memberships.get_by_user_and_organization.return_value = _membership(
        principal.user_id, org_id, OrganizationRole.viewer
    )

    result = await RemoveMemberUseCase(mock_uow).execute(principal, org_id, uuid4())

    assert result.error.code == ErrorCode.PERMISSION_DENIED.value
    mock_uow.memberships.delete.assert_not_called()


@pytest.mark.asyncio
async def test_remove_missing_member_is_not_found(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await RemoveMemberUseCase(mock_uow).execute(principal, uuid4(), uuid4())

    assert result.error.code == ErrorCode.NOT_FOUND.value
