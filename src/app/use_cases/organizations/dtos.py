"""
Organization Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel


class OrganizationInfo(BaseModel):
    """Organization as seen by the caller"""

    id: str
    name: str
    is_public: bool
    role: Optional[str]
    created_at: str


class MemberInfo(BaseModel):
    """Membership row in a member listing"""

    user_id: str
    role: str
    created_at: str


class RemoveMemberResponse(BaseModel):
    status: str
