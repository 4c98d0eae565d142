"""
Membership Entity

Links a Profile to an Organization with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import OrganizationRole


class Membership(SQLModel, table=True):
    """
    Membership entity - links a user to an organization with a role.

    Business Rules:
    - (organization_id, user_id) must be unique
    - At most one membership system-wide carries role super_admin
    - Deleted together with its organization or profile
    """

    __tablename__ = "organization_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", ondelete="CASCADE", nullable=False, index=True
    )
    user_id: UUID = Field(
        foreign_key="profiles.id", ondelete="CASCADE", nullable=False, index=True
    )

    role: OrganizationRole = Field(default=OrganizationRole.viewer, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_org_user", "organization_id", "user_id", unique=True),
        Index(
            "uq_membership_single_super_admin",
            "role",
            unique=True,
            sqlite_where=text("role = 'super_admin'"),
            postgresql_where=text("role = 'super_admin'"),
        ),
    )
