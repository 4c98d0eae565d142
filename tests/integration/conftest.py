from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import create_access_token
from src.depends import get_unit_of_work

API = ApplicationConfig.API_PREFIX
SUPER_ADMIN_EMAIL = "root@example.com"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def signup(client):
    """Simulate the identity provider creating a principal; returns auth headers"""

    async def _signup(email: str, user_id=None):
        user_id = user_id or uuid4()
        response = await client.post(
            f"{API}/hooks/principal-created",
            json={"user_id": str(user_id), "email": email},
            headers={"X-Webhook-Secret": ApplicationConfig.IDENTITY_WEBHOOK_SECRET},
        )
        assert response.status_code == 200, response.text
        token = create_access_token(user_id, email)
        return {
            "user_id": user_id,
            "headers": {"Authorization": f"Bearer {token}"},
            "redemption": response.json(),
        }

    return _signup


@pytest_asyncio.fixture
async def super_admin(client, signup):
    """Bootstrap, then sign up as the configured super admin"""
    response = await client.post(
        f"{API}/admin/bootstrap",
        json={"email": SUPER_ADMIN_EMAIL},
        headers={"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY},
    )
    assert response.status_code == 200, response.text
    user = await signup(SUPER_ADMIN_EMAIL)
    assert user["redemption"]["role"] == "super_admin"
    return user
