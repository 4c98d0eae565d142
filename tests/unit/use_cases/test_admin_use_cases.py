from uuid import uuid4

import pytest

from src.app.use_cases.admin import (
    CreateOrganizationUseCase,
    GetSuperAdminStatusUseCase,
    ListUsersWithRolesUseCase,
    PromoteUserToOwnerUseCase,
)
from src.app.use_cases.audit import GetAuditEventsUseCase
from src.domain.entities import Membership, Organization, OrganizationRole, Profile
from src.domain.errors import ErrorCode


# ============================================================================
# Permission gate: nothing is read or written for a non super admin
# ============================================================================


@pytest.mark.asyncio
async def test_admin_commands_denied_for_non_super_admin(mock_uow, principal):
    org_id = uuid4()
    calls = [
        CreateOrganizationUseCase(mock_uow).execute(principal, "Acme"),
        PromoteUserToOwnerUseCase(mock_uow).execute(principal, uuid4(), org_id),
        ListUsersWithRolesUseCase(mock_uow).execute(principal),
        GetAuditEventsUseCase(mock_uow).execute(principal),
    ]

    for call in calls:
        result = await call
        assert result.is_err()
        assert result.error.code == ErrorCode.PERMISSION_DENIED.value

    mock_uow.organizations.create.assert_not_called()
    mock_uow.memberships.create.assert_not_called()
    mock_uow.memberships.update.assert_not_called()
    mock_uow.profiles.list_all.assert_not_called()
    mock_uow.audit_events.list_page.assert_not_called()
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


# ============================================================================
# CreateOrganizationUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_create_organization_makes_caller_owner(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    organization = Organization(id=uuid4(), name="Acme", is_public=False)
    mock_uow.organizations.create.return_value = organization

    result = await CreateOrganizationUseCase(mock_uow).execute(principal, "  Acme  ")

    assert result.is_ok()
    assert result.value.organization_id == str(organization.id)
    assert mock_uow.organizations.create.call_args.args[0].name == "Acme"

    membership = mock_uow.memberships.create.call_args.args[0]
    assert membership.user_id == principal.user_id
    assert membership.organization_id == organization.id
    assert membership.role == OrganizationRole.owner
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_organization_requires_name(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await CreateOrganizationUseCase(mock_uow).execute(principal, "   ")

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR.value
    mock_uow.organizations.create.assert_not_called()


# ============================================================================
# PromoteUserToOwnerUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_promote_member_to_owner(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    org_id, user_id = uuid4(), uuid4()
    membership = Membership(
        organization_id=org_id, user_id=user_id, role=OrganizationRole.viewer
    )
    mock_uow.memberships.get_by_user_and_organization.return_value = membership

    result = await PromoteUserToOwnerUseCase(mock_uow).execute(principal, user_id, org_id)

    assert result.is_ok()
    assert result.value.promoted is True
    assert membership.role == OrganizationRole.owner
    mock_uow.memberships.update.assert_called_once_with(membership)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_promote_non_member_reports_false(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await PromoteUserToOwnerUseCase(mock_uow).execute(principal, uuid4(), uuid4())

    assert result.is_ok()
    assert result.value.promoted is False
    mock_uow.memberships.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_promote_super_admin_membership_is_conflict(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.memberships.get_by_user_and_organization.return_value = Membership(
        organization_id=uuid4(), user_id=uuid4(), role=OrganizationRole.super_admin
    )

    result = await PromoteUserToOwnerUseCase(mock_uow).execute(principal, uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.CONFLICT.value
    mock_uow.memberships.update.assert_not_called()


# ============================================================================
# ListUsersWithRolesUseCase / GetSuperAdminStatusUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_list_users_groups_memberships(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    alice, bob = Profile(id=uuid4(), email="alice@x.com"), Profile(id=uuid4(), email="bob@x.com")
    acme = Organization(id=uuid4(), name="Acme")
    public = Organization(id=uuid4(), name="Public Organization", is_public=True)
    mock_uow.profiles.list_all.return_value = [alice, bob]
    mock_uow.memberships.list_with_organizations.return_value = [
        (Membership(organization_id=acme.id, user_id=alice.id, role=OrganizationRole.owner), acme),
        (Membership(organization_id=public.id, user_id=alice.id, role=OrganizationRole.viewer), public),
    ]

    result = await ListUsersWithRolesUseCase(mock_uow).execute(principal)

    assert result.is_ok()
    users = {u.email: u for u in result.value}
    assert {o.organization_name for o in users["alice@x.com"].organizations} == {
        "Acme",
        "Public Organization",
    }
    assert users["bob@x.com"].organizations == []
    assert users["bob@x.com"].display_name == "bob@x.com"


@pytest.mark.asyncio
async def test_super_admin_status(mock_uow, principal):
    result = await GetSuperAdminStatusUseCase(mock_uow).execute(principal)
    assert result.is_ok()
    assert result.value.is_super_admin is False

    mock_uow.memberships.exists_with_role.return_value = True
    result = await GetSuperAdminStatusUseCase(mock_uow).execute(principal)
    assert result.value.is_super_admin is True
    assert result.value.email == principal.email
