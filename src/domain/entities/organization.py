"""
Organization Entity

Top-level container for prompts and memberships.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Organization(SQLModel, table=True):
    """
    Organization entity - owns memberships, prompts and API keys.

    Business Rules:
    - Only the super admin creates organizations
    - The oldest public organization is the canonical landing organization
      for self-serve signups
    - Never deleted by any operation
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    is_public: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_organization_is_public", "is_public"),)
