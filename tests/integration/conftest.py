import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from config import ApplicationConfig
from src.adapter.services.database import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from src.adapter.services.password_hasher import BcryptPasswordHasher


@pytest.fixture
def test_config(tmp_path):
    """Application config pointing at a throwaway SQLite database"""

    class IntegrationConfig(ApplicationConfig):
        DB_URI = f"sqlite+aiosqlite:///{tmp_path / 'moneytracker_test.db'}"
        BCRYPT_ROUNDS = 4
        STATIC_DIR = None
        CORS_ORIGINS = []
        LOG_LEVEL = "WARNING"

    return IntegrationConfig


@pytest_asyncio.fixture(scope="function")
async def engine(test_config):
    """Create test database engine with a fresh schema"""
    engine = create_engine_from_config(test_config)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def client(test_config):
    """Create test client backed by the app's own engine"""
    from src.api.app import create_app

    app = create_app(test_config)
    # ASGITransport does not run lifespan events
    await init_db(app.state.engine)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await app.state.engine.dispose()
