"""
API Key Routes

Personal API keys. Keys are visible to and revocable by their owner only.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.api_keys import (
    ApiKeyInfo,
    CreateApiKeyResponse,
    CreateApiKeyUseCase,
    ListApiKeysUseCase,
    RevokeApiKeyUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/api-keys", tags=["API Keys"])


class CreateApiKeyRequest(BaseModel):
    organization_id: UUID = Field(..., description="Organization the key is scoped to")
    name: str = Field(..., description="Label for the key")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ApiKeyInfo])
async def list_api_keys(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListApiKeysUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateApiKeyResponse)
async def create_api_key(
    request: CreateApiKeyRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create API Key

    The plaintext key is only ever returned by this call.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (blank name)
        - 403 Forbidden: PERMISSION_DENIED (not a member, or unknown organization)
    """
    result = await CreateApiKeyUseCase(uow).execute(
        principal, request.organization_id, request.name
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{api_key_id}", status_code=status.HTTP_200_OK, response_model=ApiKeyInfo)
async def revoke_api_key(
    api_key_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke API Key

    Raises:
        - 403 Forbidden: PERMISSION_DENIED (not the key owner, or unknown key)
        - 409 Conflict: CONFLICT (already revoked)
    """
    result = await RevokeApiKeyUseCase(uow).execute(principal, api_key_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
