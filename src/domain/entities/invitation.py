"""
Invitation Entity

Single-use, time-limited offer of a role to an email address.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InvitationStatus, OrganizationRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending offers redeemed at signup.

    Business Rules:
    - Created by the super admin only (bootstrap excepted)
    - Expires after 7 days; revocation back-dates expires_at
    - Consumed exactly once: used_at is set by redemption
    - Never deleted except with its organization
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255, nullable=False, index=True)
    token: str = Field(unique=True, index=True, max_length=128)

    role: OrganizationRole = Field(nullable=False)
    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", ondelete="CASCADE", index=True
    )
    invited_by: Optional[UUID] = Field(
        default=None, foreign_key="profiles.id", ondelete="SET NULL"
    )

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_email_created", "email", "created_at"),
    )

    def status_at(self, now: datetime) -> InvitationStatus:
        if self.used_at is not None:
            return InvitationStatus.consumed
        if self.expires_at <= now:
            return InvitationStatus.expired
        return InvitationStatus.pending
