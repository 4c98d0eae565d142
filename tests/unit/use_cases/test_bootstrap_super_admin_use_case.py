from datetime import timedelta
from uuid import uuid4

import pytest

from config import ApplicationConfig
from src.app.use_cases.bootstrap import BootstrapSuperAdminUseCase
from src.domain.base import utcnow
from src.domain.entities import Invitation, Organization, OrganizationRole
from src.domain.errors import ErrorCode


@pytest.fixture
def public_org():
    return Organization(id=uuid4(), name="Public Organization", is_public=True)


@pytest.mark.asyncio
async def test_first_run_creates_public_org_and_invitation(mock_uow, public_org):
    mock_uow.organizations.get_public.return_value = None
    mock_uow.organizations.create.return_value = public_org
    mock_uow.invitations.get_by_token.return_value = None
    mock_uow.invitations.create.side_effect = lambda invitation: invitation

    result = await BootstrapSuperAdminUseCase(mock_uow).execute(" Root@Example.com ")

    assert result.is_ok()
    assert result.value.created is True
    assert result.value.email == "root@example.com"
    assert result.value.public_organization_id == str(public_org.id)

    invitation = mock_uow.invitations.create.call_args.args[0]
    assert invitation.token == ApplicationConfig.BOOTSTRAP_TOKEN
    assert invitation.role == OrganizationRole.super_admin
    assert invitation.organization_id is None
    assert invitation.expires_at - utcnow() > timedelta(days=364)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_rerun_extends_pending_invitation(mock_uow, public_org):
    mock_uow.organizations.get_public.return_value = public_org
    existing = Invitation(
        email="root@example.com",
        token=ApplicationConfig.BOOTSTRAP_TOKEN,
        role=OrganizationRole.super_admin,
        expires_at=utcnow() + timedelta(days=1),
    )
    mock_uow.invitations.get_by_token.return_value = existing
    mock_uow.invitations.update.side_effect = lambda invitation: invitation

    result = await BootstrapSuperAdminUseCase(mock_uow).execute("root@example.com")

    assert result.is_ok()
    assert result.value.created is False
    assert existing.expires_at - utcnow() > timedelta(days=364)
    mock_uow.invitations.create.assert_not_called()
    mock_uow.organizations.create.assert_not_called()


@pytest.mark.asyncio
async def test_rerun_leaves_consumed_invitation_alone(mock_uow, public_org):
    mock_uow.organizations.get_public.return_value = public_org
    used_at = utcnow() - timedelta(days=2)
    expires_at = utcnow() + timedelta(days=100)
    existing = Invitation(
        email="root@example.com",
        token=ApplicationConfig.BOOTSTRAP_TOKEN,
        role=OrganizationRole.super_admin,
        expires_at=expires_at,
        used_at=used_at,
    )
    mock_uow.invitations.get_by_token.return_value = existing

    result = await BootstrapSuperAdminUseCase(mock_uow).execute("root@example.com")

    assert result.is_ok()
    assert existing.expires_at == expires_at
    assert existing.used_at == used_at
    mock_uow.invitations.update.assert_not_called()


@pytest.mark.asyncio
async def test_missing_email_is_validation_error(mock_uow):
    result = await BootstrapSuperAdminUseCase(mock_uow).execute("")

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR.value
    mock_uow.organizations.get_public.assert_not_called()
