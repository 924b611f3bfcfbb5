"""Pytest configuration and fixtures for the API token service.

Environment is set before app.main is imported: an in-memory SQLite
DATABASE_URL and a test salt. DB fixtures build their own StaticPool engine
(one shared in-memory database per test) and the HTTP client overrides the
session dependencies to use it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_API_TOKEN_SALT", "test-api-token-salt")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from app.application.services.api_token_service import ApiTokenService
from app.application.services.secret_codec import API_TOKEN_SALT_KEY, SecretCodec
from app.infrastructure.persistence import models  # noqa: F401  (register tables)
from app.infrastructure.persistence.database import (
    Base,
    build_engine,
    build_session_factory,
    get_db,
    get_db_transactional,
)
from app.infrastructure.persistence.repositories import (
    ApiTokenRepository,
    TokenPermissionRepository,
)
from app.main import app

TEST_SALT = "test-api-token-salt"


class DictConfigProvider:
    """In-memory IConfigProvider for unit tests."""

    def __init__(self, values: dict | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str):
        return self.values.get(key)

    def set(self, key: str, value) -> None:
        self.values[key] = value


@pytest.fixture
def config_provider() -> DictConfigProvider:
    """Config provider with the test salt configured."""
    return DictConfigProvider({API_TOKEN_SALT_KEY: TEST_SALT})


@pytest.fixture
def secret_codec(config_provider: DictConfigProvider) -> SecretCodec:
    return SecretCodec(config_provider, environ={})


@pytest.fixture
async def db_engine():
    """Fresh in-memory SQLite database with all tables created."""
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    session_factory = build_session_factory(db_engine)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def api_token_service(db_session: AsyncSession, secret_codec: SecretCodec) -> ApiTokenService:
    """ApiTokenService wired to real SQLAlchemy repositories on db_session."""
    return ApiTokenService(
        token_repo=ApiTokenRepository(db_session),
        permission_repo=TokenPermissionRepository(db_session),
        secret_codec=secret_codec,
    )


@pytest.fixture
async def client(db_engine) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), backed by db_engine."""
    session_factory = build_session_factory(db_engine)

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
