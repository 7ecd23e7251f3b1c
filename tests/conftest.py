import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./unused.db")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from app.main import app
from app.db.session import Base, get_db
from app.core.jwt_config import create_access_token
from app.core.middleware import request_stats
from app.schemas.user import UserCreate
from app.services.user_service import create_user


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Fresh SQLite database per test, tables built from the ORM metadata."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client bound to the app with get_db pointed at the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    request_stats.reset()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _make_user(session_factory, email, first_name, last_name):
    async with session_factory() as session:
        return await create_user(session, UserCreate(
            email=email,
            password="secret123",
            first_name=first_name,
            last_name=last_name
        ))


@pytest_asyncio.fixture
async def alice(session_factory):
    return await _make_user(session_factory, "alice@example.com", "Alice", "Nguyen")


@pytest_asyncio.fixture
async def bob(session_factory):
    return await _make_user(session_factory, "bob@example.com", "Bob", "Tran")


@pytest_asyncio.fixture
async def carol(session_factory):
    return await _make_user(session_factory, "carol@example.com", "Carol", "Le")


def auth_headers(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return auth_headers
