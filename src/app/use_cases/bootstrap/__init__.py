from .bootstrap_super_admin_use_case import (
    BootstrapSuperAdminResponse,
    BootstrapSuperAdminUseCase,
)

__all__ = ["BootstrapSuperAdminUseCase", "BootstrapSuperAdminResponse"]
