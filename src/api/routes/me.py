from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import GetSuperAdminStatusUseCase, SuperAdminStatusResponse
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/me", tags=["Me"])


@router.get(
    "/super-admin-status",
    status_code=status.HTTP_200_OK,
    response_model=SuperAdminStatusResponse,
)
async def get_super_admin_status(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Whether the caller is the super admin.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
    """
    result = await GetSuperAdminStatusUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
