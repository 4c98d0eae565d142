from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.invitations import (
    CreateInvitationUseCase,
    ListPendingInvitationsUseCase,
    RevokeInvitationUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import Invitation, Organization, OrganizationRole
from src.domain.errors import ErrorCode


# ============================================================================
# CreateInvitationUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_super_admin_creates_invitation(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    org_id = uuid4()
    mock_uow.organizations.get_by_id.return_value = Organization(id=org_id, name="Acme")

    result = await CreateInvitationUseCase(mock_uow).execute(
        principal, "New.User@Example.com", "admin", org_id
    )

    assert result.is_ok()
    response = result.value
    assert response.email == "new.user@example.com"
    assert response.role == "admin"
    assert response.organization_id == str(org_id)

    invitation = mock_uow.invitations.create.call_args.args[0]
    assert invitation.role == OrganizationRole.admin
    assert invitation.invited_by == principal.user_id
    assert invitation.used_at is None
    assert len(invitation.token) >= 32
    ttl = invitation.expires_at - utcnow()
    assert timedelta(days=6, hours=23) < ttl <= timedelta(days=7)

    mock_uow.audit_events.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_invitation_without_organization(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await CreateInvitationUseCase(mock_uow).execute(
        principal, "solo@example.com", "viewer"
    )

    assert result.is_ok()
    assert result.value.organization_id is None
    mock_uow.organizations.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_non_super_admin_cannot_invite(mock_uow, principal):
    result = await CreateInvitationUseCase(mock_uow).execute(
        principal, "someone@example.com", "viewer"
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.PERMISSION_DENIED.value
    mock_uow.invitations.create.assert_not_called()
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email",
    [
        "",
        "not-an-email",
        "a@b",
        "spaces in@example.com",
        "a..b@example.com",
        ".alice@example.com",
        "bob@-bad-.com",
    ],
)
async def test_invalid_email_rejected(mock_uow, principal, email):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await CreateInvitationUseCase(mock_uow).execute(principal, email, "viewer")

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR.value
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["super_admin", "member", ""])
async def test_invalid_role_rejected(mock_uow, principal, role):
    mock_uow.memberships.exists_with_role.return_value = True

    result = await CreateInvitationUseCase(mock_uow).execute(
        principal, "someone@example.com", role
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR.value


@pytest.mark.asyncio
async def test_unknown_organization_rejected(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.organizations.get_by_id.return_value = None

    result = await CreateInvitationUseCase(mock_uow).execute(
        principal, "someone@example.com", "viewer", uuid4()
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND.value
    mock_uow.invitations.create.assert_not_called()


# ============================================================================
# ListPendingInvitationsUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_list_pending_labels_missing_organization(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    org_id = uuid4()
    with_org = Invitation(
        email="a@example.com",
        token="t1",
        role=OrganizationRole.owner,
        organization_id=org_id,
        expires_at=utcnow() + timedelta(days=3),
        created_at=utcnow(),
    )
    without_org = Invitation(
        email="b@example.com",
        token="t2",
        role=OrganizationRole.viewer,
        expires_at=utcnow() + timedelta(days=3),
        created_at=utcnow(),
    )
    mock_uow.invitations.list_pending.return_value = [(with_org, "Acme"), (without_org, None)]

    result = await ListPendingInvitationsUseCase(mock_uow).execute(principal)

    assert result.is_ok()
    assert [p.organization_name for p in result.value] == ["Acme", "No Organization"]
    assert result.value[0].organization_id == str(org_id)
    assert result.value[1].organization_id is None


@pytest.mark.asyncio
async def test_list_pending_requires_super_admin(mock_uow, principal):
    result = await ListPendingInvitationsUseCase(mock_uow).execute(principal)

    assert result.is_err()
    assert result.error.code == ErrorCode.PERMISSION_DENIED.value
    mock_uow.invitations.list_pending.assert_not_called()


# ============================================================================
# RevokeInvitationUseCase
# ============================================================================


@pytest.mark.asyncio
async def test_revoke_pending_invitation(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.invitations.expire.return_value = True
    invitation_id = uuid4()

    result = await RevokeInvitationUseCase(mock_uow).execute(principal, invitation_id)

    assert result.is_ok()
    assert result.value.revoked is True
    args = mock_uow.invitations.expire.call_args.args
    assert args[0] == invitation_id
    # Back-dated one day before "now"
    assert args[2] == args[1] - timedelta(days=1)
    mock_uow.audit_events.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_revoke_non_pending_invitation_is_no_op(mock_uow, principal):
    mock_uow.memberships.exists_with_role.return_value = True
    mock_uow.invitations.expire.return_value = False

    result = await RevokeInvitationUseCase(mock_uow).execute(principal, uuid4())

    assert result.is_ok()
    assert result.value.revoked is False
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_revoke_requires_super_admin(mock_uow, principal):
    result = await RevokeInvitationUseCase(mock_uow).execute(principal, uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.PERMISSION_DENIED.value
    mock_uow.invitations.expire.assert_not_called()
