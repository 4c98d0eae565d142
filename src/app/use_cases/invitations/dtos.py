"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation lifecycle.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr


# ============================================================================
# Command DTOs
# ============================================================================


class PrincipalCreatedEvent(BaseModel):
    """Signup notification delivered by the identity provider"""

    user_id: UUID
    email: EmailStr
    display_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class CreateInvitationResponse(BaseModel):
    """Response for create invitation use case"""

    invitation_id: str
    email: str
    role: str
    organization_id: Optional[str]
    expires_at: str


class PendingInvitation(BaseModel):
    """One row of the pending invitation listing"""

    id: str
    email: str
    role: str
    organization_id: Optional[str]
    organization_name: str
    expires_at: str
    created_at: str


class RevokeInvitationResponse(BaseModel):
    """Response for revoke invitation use case"""

    revoked: bool


class RedeemInvitationResponse(BaseModel):
    """Outcome of handling a principal-created event"""

    user_id: str
    invitation_id: Optional[str] = None
    organization_id: Optional[str] = None
    role: Optional[str] = None
    already_processed: bool = False
