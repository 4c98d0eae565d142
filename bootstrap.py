"""
Create the schema and seed the public organization and the super admin
invitation for SUPER_ADMIN_EMAIL (or the email given on the command line).

Safe to run on every deploy.
"""

import asyncio
import logging
import sys

from sqlmodel import SQLModel

import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.bootstrap import BootstrapSuperAdminUseCase
from src.depends import AsyncSessionLocal, engine

logger = logging.getLogger("bootstrap")


async def main(email: str) -> int:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        result = await BootstrapSuperAdminUseCase(SqlAlchemyUnitOfWork(session)).execute(email)

    await engine.dispose()

    if result.is_err():
        logger.error("Bootstrap failed: %s", result.error.message)
        return 1

    seeded = result.value
    logger.info(
        "Super admin invitation for %s %s (expires %s)",
        seeded.email,
        "created" if seeded.created else "refreshed",
        seeded.expires_at,
    )
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    target = sys.argv[1] if len(sys.argv) > 1 else ApplicationConfig.SUPER_ADMIN_EMAIL
    sys.exit(asyncio.run(main(target)))
