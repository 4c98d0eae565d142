"""
Prompt Entities

Prompts belong to an organization; variants and arguments belong to a prompt.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Prompt(SQLModel, table=True):
    """
    Prompt entity.

    Business Rules:
    - Name is unique within an organization
    - creator_id must be the principal that created it
    """

    __tablename__ = "prompts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", ondelete="CASCADE", nullable=False, index=True
    )
    name: str = Field(max_length=255)
    description: Optional[str] = None
    creator_id: UUID = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_prompt_org_name", "organization_id", "name", unique=True),
    )


class PromptVariant(SQLModel, table=True):
    """A concrete text of a prompt; at most one variant is the default"""

    __tablename__ = "prompt_variants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    prompt_id: UUID = Field(
        foreign_key="prompts.id", ondelete="CASCADE", nullable=False, index=True
    )
    content: str
    notes: Optional[str] = None
    is_default: bool = Field(default=False)
    created_by: UUID = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))


class PromptArgument(SQLModel, table=True):
    __tablename__ = "prompt_arguments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    prompt_id: UUID = Field(
        foreign_key="prompts.id", ondelete="CASCADE", nullable=False, index=True
    )
    name: str = Field(max_length=255)
    description: Optional[str] = None
    required: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_prompt_argument_name", "prompt_id", "name", unique=True),
    )
