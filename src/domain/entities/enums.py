"""
Prompt Access Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class OrganizationRole(str, Enum):
    """User role within an organization"""

    viewer = "viewer"
    admin = "admin"
    owner = "owner"
    super_admin = "super_admin"


class InvitationStatus(str, Enum):
    """Invitation lifecycle state, derived from used_at / expires_at"""

    pending = "pending"
    expired = "expired"
    consumed = "consumed"


# Roles that may be granted through invitations or role changes.
# super_admin is only ever issued by the bootstrap procedure.
ASSIGNABLE_ROLES = (
    OrganizationRole.viewer,
    OrganizationRole.admin,
    OrganizationRole.owner,
)

EDITOR_ROLES = frozenset({OrganizationRole.admin, OrganizationRole.owner})
