"""
Invitation Lifecycle Use Cases

Issuing, listing, revoking and redeeming invitations.
"""

from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import (
    CreateInvitationResponse,
    PendingInvitation,
    PrincipalCreatedEvent,
    RedeemInvitationResponse,
    RevokeInvitationResponse,
)
from .list_pending_invitations_use_case import ListPendingInvitationsUseCase
from .redeem_invitation_use_case import RedeemInvitationUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "ListPendingInvitationsUseCase",
    "RevokeInvitationUseCase",
    "RedeemInvitationUseCase",
    "CreateInvitationResponse",
    "PendingInvitation",
    "PrincipalCreatedEvent",
    "RedeemInvitationResponse",
    "RevokeInvitationResponse",
]
