"""
Organization API Routes

Organization visibility and membership management.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.organizations import (
    ChangeMemberRoleUseCase,
    GetOrganizationUseCase,
    ListMembersUseCase,
    ListOrganizationsUseCase,
    MemberInfo,
    OrganizationInfo,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateOrganizationUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/organizations", tags=["Organizations"])


class UpdateOrganizationRequest(BaseModel):
    name: Optional[str] = None
    is_public: Optional[bool] = None


class ChangeRoleRequest(BaseModel):
    role: str = Field(..., description="New role: viewer, admin or owner")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[OrganizationInfo])
async def list_organizations(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Organizations the caller belongs to, plus public ones"""
    result = await ListOrganizationsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationInfo,
)
async def get_organization(
    organization_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOrganizationUseCase(uow).execute(principal, organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationInfo,
)
async def update_organization(
    organization_id: UUID,
    request: UpdateOrganizationRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Organization

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: PERMISSION_DENIED (owner or super admin only)
        - 404 Not Found: NOT_FOUND (only reported to callers allowed to see it)
    """
    result = await UpdateOrganizationUseCase(uow).execute(
        principal, organization_id, name=request.name, is_public=request.is_public
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{organization_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=List[MemberInfo],
)
async def list_members(
    organization_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMembersUseCase(uow).execute(principal, organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{organization_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberInfo,
)
async def change_member_role(
    organization_id: UUID,
    user_id: UUID,
    request: ChangeRoleRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (role)
        - 403 Forbidden: PERMISSION_DENIED (owner or super admin only)
        - 404 Not Found: NOT_FOUND (membership)
        - 409 Conflict: CONFLICT (super admin membership)
    """
    result = await ChangeMemberRoleUseCase(uow).execute(
        principal, organization_id, user_id, request.role
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{organization_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    organization_id: UUID,
    user_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RemoveMemberUseCase(uow).execute(principal, organization_id, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
