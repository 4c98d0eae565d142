"""
Profile Entity

Local record of a principal known to the identity provider.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Profile(SQLModel, table=True):
    """
    Profile entity - created once per principal at signup.

    Business Rules:
    - id is the identity provider's user id
    - display_name falls back to the email address
    """

    __tablename__ = "profiles"

    id: UUID = Field(primary_key=True)
    email: str = Field(max_length=255, index=True)
    display_name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
