from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def list_redeemable_by_email(
        self, email: str, now: datetime
    ) -> List[Invitation]:
        """Get pending invitations for an email, newest first"""
        pass

    @abstractmethod
    async def list_pending(self, now: datetime) -> List[Tuple[Invitation, Optional[str]]]:
        """Get all pending invitations with their organization name, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def mark_used(self, invitation_id: UUID, now: datetime) -> bool:
        """
        Consume a pending invitation.

        Returns False when the invitation was already consumed or has
        expired, so only one concurrent caller can win.
        """
        pass

    @abstractmethod
    async def expire(
        self, invitation_id: UUID, now: datetime, expires_at: datetime
    ) -> bool:
        """Back-date a pending invitation's expiry. Returns whether a row changed."""
        pass
