"""
Get Super Admin Status Use Case
"""

from src.app.services.role_resolver import RoleResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import SuperAdminStatusResponse


class GetSuperAdminStatusUseCase:
    """Reports whether the caller is the super admin. Open to every principal."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[SuperAdminStatusResponse]:
        async with self.uow:
            resolver = RoleResolver(self.uow.memberships)
            return Return.ok(
                SuperAdminStatusResponse(
                    is_super_admin=await resolver.is_super_admin(principal.user_id),
                    user_id=str(principal.user_id),
                    email=principal.email,
                )
            )
