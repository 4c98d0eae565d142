"""
Use Cases

Use cases are organized into domain folders:
- invitations/: Invitation lifecycle and signup redemption
- bootstrap/: First super admin seeding
- admin/: Super admin command surface
- organizations/: Organization visibility and members
- prompts/: Prompts, variants and arguments
- api_keys/: Personal API keys
- audit/: Audit logs

Import from subdirectories for better organization.
"""

from .admin import (
    CreateOrganizationUseCase,
    GetSuperAdminStatusUseCase,
    ListUsersWithRolesUseCase,
    PromoteUserToOwnerUseCase,
)
from .api_keys import (
    CreateApiKeyUseCase,
    ListApiKeysUseCase,
    RevokeApiKeyUseCase,
)
from .audit import (
    GetAuditEventsUseCase,
)
from .bootstrap import (
    BootstrapSuperAdminUseCase,
)
from .invitations import (
    CreateInvitationUseCase,
    ListPendingInvitationsUseCase,
    RedeemInvitationUseCase,
    RevokeInvitationUseCase,
)
from .organizations import (
    ChangeMemberRoleUseCase,
    GetOrganizationUseCase,
    ListMembersUseCase,
    ListOrganizationsUseCase,
    RemoveMemberUseCase,
    UpdateOrganizationUseCase,
)
from .prompts import (
    AddPromptArgumentUseCase,
    AddPromptVariantUseCase,
    CreatePromptUseCase,
    DeletePromptUseCase,
    GetPromptUseCase,
    ListPromptsUseCase,
    UpdatePromptUseCase,
)

__all__ = [
    # Invitations
    "CreateInvitationUseCase",
    "ListPendingInvitationsUseCase",
    "RevokeInvitationUseCase",
    "RedeemInvitationUseCase",
    # Bootstrap
    "BootstrapSuperAdminUseCase",
    # Admin
    "CreateOrganizationUseCase",
    "PromoteUserToOwnerUseCase",
    "ListUsersWithRolesUseCase",
    "GetSuperAdminStatusUseCase",
    # Organizations
    "ListOrganizationsUseCase",
    "GetOrganizationUseCase",
    "UpdateOrganizationUseCase",
    "ListMembersUseCase",
    "ChangeMemberRoleUseCase",
    "RemoveMemberUseCase",
    # Prompts
    "CreatePromptUseCase",
    "GetPromptUseCase",
    "ListPromptsUseCase",
    "UpdatePromptUseCase",
    "DeletePromptUseCase",
    "AddPromptVariantUseCase",
    "AddPromptArgumentUseCase",
    # API keys
    "CreateApiKeyUseCase",
    "ListApiKeysUseCase",
    "RevokeApiKeyUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
