"""Shared pytest fixtures.

Layers:
- Unit tests: mock_logger / mock_audit and hand-built entities
- Integration tests: a fresh sqlite+aiosqlite file database per test
  (``database``), real repositories and services
- API tests: the FastAPI app built by create_app() on that database,
  driven through httpx.AsyncClient with ASGITransport

All async tests run under pytest-asyncio (asyncio_mode = "auto").
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.core.config import Settings
from src.core.container import Container, build_container
from src.core.enums import Environment
from src.core.result import Success
from src.domain.entities.user import User
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import (
    SessionRepository,
    UserRepository,
)
from src.infrastructure.security import BcryptPasswordService, JWTService
from src.main import create_app
from tests.factories import CLIENT_IP, TEST_JWT_SECRET, make_user
from tests.factories import password_service as _password_service


# =============================================================================
# Mock fixtures (unit tests)
# =============================================================================


@pytest.fixture
def mock_logger():
    """Mock logger with the LoggerProtocol methods.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.critical = Mock()
    return logger


@pytest.fixture
def mock_audit():
    """Mock audit recorder that always succeeds."""
    audit = AsyncMock()
    audit.record = AsyncMock(return_value=Success(value=None))
    return audit


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return _password_service


@pytest.fixture
def token_service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


# =============================================================================
# Database fixtures (integration and API tests)
# =============================================================================


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test sqlite file."""
    return Settings(
        environment=Environment.TESTING,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'auth.db'}",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Fresh schema per test; engine disposed afterwards."""
    db = Database(database_url=test_settings.database_url)
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def user_repo(database: Database) -> UserRepository:
    return UserRepository(database)


@pytest.fixture
def session_repo(database: Database) -> SessionRepository:
    return SessionRepository(database)


@pytest.fixture
def create_user(user_repo: UserRepository) -> Callable[..., Awaitable[User]]:
    """Factory persisting users whose password is TEST_PASSWORD.

    Usage:
        async def test_something(create_user):
            admin = await create_user(email="root@leadnex.io", role=UserRole.ADMIN)
    """

    async def _create(**kwargs: object) -> User:
        user = make_user(**kwargs)  # type: ignore[arg-type]
        await user_repo.save(user)
        return user

    return _create


# =============================================================================
# Application fixtures
# =============================================================================


@pytest_asyncio.fixture
async def container(
    test_settings: Settings, database: Database, mock_logger
) -> AsyncGenerator[Container, None]:
    """Fully wired container on the per-test database."""
    wired = build_container(test_settings, logger=mock_logger)
    yield wired
    await wired.database.close()


@pytest_asyncio.fixture
async def client(container: Container) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app built on ``container``."""
    app = create_app(container=container)
    transport = ASGITransport(app=app, client=(CLIENT_IP, 50000))
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
