import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401
from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jose_token_service import JoseTokenService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.depends import (
    get_password_hasher,
    get_reset_url_base,
    get_token_service,
    get_unit_of_work,
)
from tests.fixtures.factories import RESET_URL_BASE, TEST_SECRET, register_user
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
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


@pytest.fixture
def token_service():
    return JoseTokenService(TEST_SECRET)


@pytest_asyncio.fixture
async def app(db_session, token_service):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_token_service] = lambda: token_service
    # Minimum bcrypt cost keeps tests fast
    app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(lambda: 4)
    app.dependency_overrides[get_reset_url_base] = lambda: RESET_URL_BASE

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def alice(client, test_data):
    return await register_user(client, test_data.user("alice"))


@pytest_asyncio.fixture
async def bob(client, test_data):
    return await register_user(client, test_data.user("bob"))
