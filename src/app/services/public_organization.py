from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Organization


async def get_or_create_public_organization(uow: UnitOfWork) -> Organization:
    """Return the canonical public organization, creating it when absent"""
    organization = await uow.organizations.get_public()
    if organization is None:
        organization = await uow.organizations.create(
            Organization(name=ApplicationConfig.PUBLIC_ORGANIZATION_NAME, is_public=True)
        )
    return organization
