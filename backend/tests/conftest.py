"""Pytest configuration for tests directory."""
import sys
from pathlib import Path

# Add the backend directory to Python path
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest
from httpx import ASGITransport, AsyncClient

from app.infra.db.base import create_sessionmaker
from app.infra.seed import seed_sample_data
from app.infra.storage import Repositories, build_database_repositories, build_memory_repositories
from app.settings import Settings

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def memory_repos() -> Repositories:
    """Fresh, empty in-memory repositories."""
    return build_memory_repositories()


@pytest.fixture
async def seeded_repos(memory_repos: Repositories) -> Repositories:
    """In-memory repositories with the sample catalogue loaded."""
    await seed_sample_data(memory_repos)
    return memory_repos


@pytest.fixture
async def db_repos():
    """SQLAlchemy repositories over in-memory SQLite with the schema created."""
    repos = build_database_repositories(SQLITE_MEMORY_URL)
    await repos.init_schema()
    yield repos
    await repos.close()


@pytest.fixture
def db_session_factory(db_repos: Repositories):
    """Session factory bound to the test database."""
    return create_sessionmaker(db_repos.engine)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(storage_backend="memory", seed_sample_data=False, log_level="WARNING")


@pytest.fixture
async def client(test_settings: Settings, seeded_repos: Repositories):
    """HTTP client against an app backed by the seeded in-memory repositories."""
    from app.main import create_app

    app = create_app(settings=test_settings, repositories=seeded_repos)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
