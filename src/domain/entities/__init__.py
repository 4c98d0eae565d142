"""
Prompt Access Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ASSIGNABLE_ROLES,
    EDITOR_ROLES,
    InvitationStatus,
    OrganizationRole,
)

# Export all entities
from .organization import Organization
from .profile import Profile
from .membership import Membership
from .invitation import Invitation
from .prompt import Prompt, PromptArgument, PromptVariant
from .api_key import ApiKey
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ASSIGNABLE_ROLES",
    "EDITOR_ROLES",
    "InvitationStatus",
    "OrganizationRole",
    # Entities
    "Organization",
    "Profile",
    "Membership",
    "Invitation",
    "Prompt",
    "PromptVariant",
    "PromptArgument",
    "ApiKey",
    "AuditEvent",
]
