"""Administrative command surface: super admin operations."""

from .create_organization_use_case import CreateOrganizationUseCase
from .dtos import (
    CreateOrganizationResponse,
    PromoteUserResponse,
    SuperAdminStatusResponse,
    UserOrganization,
    UserWithRoles,
)
from .get_super_admin_status_use_case import GetSuperAdminStatusUseCase
from .list_users_with_roles_use_case import ListUsersWithRolesUseCase
from .promote_user_to_owner_use_case import PromoteUserToOwnerUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "PromoteUserToOwnerUseCase",
    "ListUsersWithRolesUseCase",
    "GetSuperAdminStatusUseCase",
    "CreateOrganizationResponse",
    "PromoteUserResponse",
    "SuperAdminStatusResponse",
    "UserOrganization",
    "UserWithRoles",
]
