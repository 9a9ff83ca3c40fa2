"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Environment defaults set before any expense_tracker import reads settings
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session sees the same DB
    - Tokens minted directly with create_access_token: route tests skip bcrypt hashing
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import expense_tracker.infrastructure.database as db_module  # noqa: E402
from expense_tracker.config import get_settings  # noqa: E402
from expense_tracker.db.base import Base  # noqa: E402
from expense_tracker.infrastructure.credentials import create_access_token  # noqa: E402
from expense_tracker.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from expense_tracker.main import app  # noqa: E402
from expense_tracker.models.user import User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _seed_user(db: AsyncSession, email: str, name: str) -> User:
    user = User(email=email, name=name, password_hash="unused-in-these-tests")
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def user_a(test_db):
    return await _seed_user(test_db, "a@x.com", "Alice")


@pytest.fixture
async def user_b(test_db):
    return await _seed_user(test_db, "b@x.com", "Bob")


@pytest.fixture
def auth_headers():
    """Build an Authorization header for a token issued to the given email."""
    def _headers(email: str) -> dict[str, str]:
        token = create_access_token(email, get_settings())
        return {"Authorization": f"Bearer {token}"}
    return _headers
