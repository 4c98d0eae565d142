"""
Organization Use Cases

Organization visibility and member management.
"""

from .change_member_role_use_case import ChangeMemberRoleUseCase
from .dtos import MemberInfo, OrganizationInfo, RemoveMemberResponse
from .get_organization_use_case import GetOrganizationUseCase
from .list_members_use_case import ListMembersUseCase
from .list_organizations_use_case import ListOrganizationsUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_organization_use_case import UpdateOrganizationUseCase

__all__ = [
    "ListOrganizationsUseCase",
    "GetOrganizationUseCase",
    "UpdateOrganizationUseCase",
    "ListMembersUseCase",
    "ChangeMemberRoleUseCase",
    "RemoveMemberUseCase",
    "OrganizationInfo",
    "MemberInfo",
    "RemoveMemberResponse",
]
