"""
Prompt API Routes

Prompts are listed and created under their organization and addressed by
id afterwards.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.prompts import (
    AddPromptArgumentUseCase,
    AddPromptVariantUseCase,
    CreatePromptUseCase,
    DeletePromptResponse,
    DeletePromptUseCase,
    GetPromptUseCase,
    ListPromptsUseCase,
    PromptArgumentInfo,
    PromptDetail,
    PromptInfo,
    PromptVariantInfo,
    UpdatePromptUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(tags=["Prompts"])


class CreatePromptRequest(BaseModel):
    name: str = Field(..., description="Prompt name, unique within the organization")
    description: Optional[str] = None
    creator_id: Optional[UUID] = Field(None, description="Defaults to the caller")


class UpdatePromptRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class AddVariantRequest(BaseModel):
    content: str
    notes: Optional[str] = None
    is_default: bool = False


class AddArgumentRequest(BaseModel):
    name: str
    description: Optional[str] = None
    required: bool = False


@router.get(
    "/organizations/{organization_id}/prompts",
    status_code=status.HTTP_200_OK,
    response_model=List[PromptInfo],
)
async def list_prompts(
    organization_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPromptsUseCase(uow).execute(principal, organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/organizations/{organization_id}/prompts",
    status_code=status.HTTP_201_CREATED,
    response_model=PromptInfo,
)
async def create_prompt(
    organization_id: UUID,
    request: CreatePromptRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Prompt

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (blank name)
        - 403 Forbidden: PERMISSION_DENIED (admin/owner only, creator must be caller)
        - 404 Not Found: NOT_FOUND (organization, super admin only)
        - 409 Conflict: CONFLICT (duplicate name)
    """
    result = await CreatePromptUseCase(uow).execute(
        principal,
        organization_id,
        request.name,
        description=request.description,
        creator_id=request.creator_id,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/prompts/{prompt_id}",
    status_code=status.HTTP_200_OK,
    response_model=PromptDetail,
)
async def get_prompt(
    prompt_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPromptUseCase(uow).execute(principal, prompt_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/prompts/{prompt_id}",
    status_code=status.HTTP_200_OK,
    response_model=PromptInfo,
)
async def update_prompt(
    prompt_id: UUID,
    request: UpdatePromptRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdatePromptUseCase(uow).execute(
        principal, prompt_id, name=request.name, description=request.description
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/prompts/{prompt_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeletePromptResponse,
)
async def delete_prompt(
    prompt_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeletePromptUseCase(uow).execute(principal, prompt_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/prompts/{prompt_id}/variants",
    status_code=status.HTTP_201_CREATED,
    response_model=PromptVariantInfo,
)
async def add_prompt_variant(
    prompt_id: UUID,
    request: AddVariantRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddPromptVariantUseCase(uow).execute(
        principal,
        prompt_id,
        request.content,
        notes=request.notes,
        is_default=request.is_default,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/prompts/{prompt_id}/arguments",
    status_code=status.HTTP_201_CREATED,
    response_model=PromptArgumentInfo,
)
async def add_prompt_argument(
    prompt_id: UUID,
    request: AddArgumentRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddPromptArgumentUseCase(uow).execute(
        principal,
        prompt_id,
        request.name,
        description=request.description,
        required=request.required,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
