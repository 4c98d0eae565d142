"""
Admin Use Case DTOs (Data Transfer Objects)

Response classes for the super admin command surface.
"""

from typing import List

from pydantic import BaseModel


class CreateOrganizationResponse(BaseModel):
    """Response for create organization use case"""

    organization_id: str
    name: str
    is_public: bool


class PromoteUserResponse(BaseModel):
    """Response for promote user to owner use case"""

    promoted: bool


class UserOrganization(BaseModel):
    """Organization entry in the user listing"""

    organization_id: str
    organization_name: str
    role: str
    is_public: bool


class UserWithRoles(BaseModel):
    """One user with every organization role they hold"""

    user_id: str
    email: str
    display_name: str
    organizations: List[UserOrganization]


class SuperAdminStatusResponse(BaseModel):
    """Super admin status of the current principal"""

    is_super_admin: bool
    user_id: str
    email: str
