"""
ApiKey Entity

Personal API keys scoped to an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class ApiKey(SQLModel, table=True):
    """
    ApiKey entity.

    Business Rules:
    - Only the owning user can see or revoke a key
    - key_hash is a bcrypt hash; the plaintext is shown once
    - key_prefix is the non-secret start of the key, kept for lookup and display
    - Revocation sets revoked_at, rows are kept
    """

    __tablename__ = "api_keys"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", ondelete="CASCADE", nullable=False
    )
    name: str = Field(max_length=255)
    key_prefix: str = Field(max_length=16)
    key_hash: str = Field(max_length=60)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    last_used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_api_key_prefix", "key_prefix"),)
