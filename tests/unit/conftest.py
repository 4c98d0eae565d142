from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.principal import Principal


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository as an AsyncMock"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.organizations = AsyncMock()
    uow.profiles = AsyncMock()
    uow.memberships = AsyncMock()
    uow.invitations = AsyncMock()
    uow.prompts = AsyncMock()
    uow.prompt_variants = AsyncMock()
    uow.prompt_arguments = AsyncMock()
    uow.api_keys = AsyncMock()
    uow.audit_events = AsyncMock()

    # Nobody is super admin or member unless a test says so
    uow.memberships.exists_with_role.return_value = False
    uow.memberships.any_with_role.return_value = False
    uow.memberships.get_by_user_id.return_value = []
    uow.memberships.get_by_user_and_organization.return_value = None

    return uow


@pytest.fixture
def principal():
    return Principal(user_id=uuid4(), email="caller@example.com")


