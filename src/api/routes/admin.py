"""
Admin API Routes - Super Admin Command Surface

Every command re-checks super admin status through the policy engine;
a caller that is not the super admin gets 403 and nothing is written.
The bootstrap endpoint is for operators and uses the admin API key.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
    ListUsersWithRolesUseCase,
    PromoteUserResponse,
    PromoteUserToOwnerUseCase,
    UserWithRoles,
)
from src.app.use_cases.audit import AuditEventsPage, GetAuditEventsUseCase
from src.app.use_cases.bootstrap import (
    BootstrapSuperAdminResponse,
    BootstrapSuperAdminUseCase,
)
from src.app.use_cases.invitations import (
    CreateInvitationResponse,
    CreateInvitationUseCase,
    ListPendingInvitationsUseCase,
    PendingInvitation,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/admin", tags=["Admin"])


class CreateOrganizationRequest(BaseModel):
    name: str = Field(..., description="Organization name")
    is_public: bool = Field(False, description="Visible to non-members")


class CreateInvitationRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address to invite")
    role: str = Field(..., description="Role to grant: viewer, admin or owner")
    organization_id: Optional[UUID] = Field(None, description="Target organization")


class PromoteUserRequest(BaseModel):
    user_id: UUID = Field(..., description="User to promote")


class BootstrapRequest(BaseModel):
    email: Optional[EmailStr] = Field(None, description="Defaults to SUPER_ADMIN_EMAIL")


@router.post(
    "/organizations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateOrganizationResponse,
)
async def create_organization(
    request: CreateOrganizationRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    The calling super admin becomes owner of the new organization.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (blank name)
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: PERMISSION_DENIED
    """
    result = await CreateOrganizationUseCase(uow).execute(
        principal, request.name, request.is_public
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateInvitationResponse,
)
async def create_invitation(
    request: CreateInvitationRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invitation

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (email format, role)
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: NOT_FOUND (organization)
    """
    result = await CreateInvitationUseCase(uow).execute(
        principal, request.email, request.role, request.organization_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/invitations",
    status_code=status.HTTP_200_OK,
    response_model=List[PendingInvitation],
)
async def list_pending_invitations(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending invitations, newest first"""
    result = await ListPendingInvitationsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=RevokeInvitationResponse,
)
async def revoke_invitation(
    invitation_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Invitation

    Returns revoked=false when the invitation is unknown, consumed or
    already expired.
    """
    result = await RevokeInvitationUseCase(uow).execute(principal, invitation_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/organizations/{organization_id}/owners",
    status_code=status.HTTP_200_OK,
    response_model=PromoteUserResponse,
)
async def promote_user_to_owner(
    organization_id: UUID,
    request: PromoteUserRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Promote User to Owner

    Returns promoted=false when the user is not a member.

    Raises:
        - 403 Forbidden: PERMISSION_DENIED
        - 409 Conflict: CONFLICT (super admin membership)
    """
    result = await PromoteUserToOwnerUseCase(uow).execute(
        principal, request.user_id, organization_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/users",
    status_code=status.HTTP_200_OK,
    response_model=List[UserWithRoles],
)
async def list_users_with_roles(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUsersWithRolesUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsPage,
)
async def get_audit_events(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    organization_id: Optional[UUID] = Query(None, description="Only this organization"),
    action: Optional[str] = Query(None, description="Only this action"),
):
    """
    Get Audit Events

    Query Parameters:
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page
        - organization_id: Only events of this organization
        - action: Only events with this action, e.g. invitation_created

    Returns:
        - events: List of audit events ordered by newest first
        - next_cursor: Cursor for next page (null if no more events)
    """
    result = await GetAuditEventsUseCase(uow).execute(
        principal,
        limit=limit,
        cursor=cursor,
        organization_id=organization_id,
        action=action,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/bootstrap",
    status_code=status.HTTP_200_OK,
    response_model=BootstrapSuperAdminResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def bootstrap_super_admin(
    request: BootstrapRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Bootstrap Super Admin

    Seeds the public organization and the super admin invitation.
    Safe to call repeatedly.

    Requires: X-Admin-API-Key header
    """
    email = request.email or ApplicationConfig.SUPER_ADMIN_EMAIL
    result = await BootstrapSuperAdminUseCase(uow).execute(email)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
