import os
import tempfile

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# Keep static files and logs out of the working tree before the app is imported
_scratch = tempfile.mkdtemp(prefix="game_catalog_test_")
os.environ.setdefault("PUBLIC_DIR", os.path.join(_scratch, "public"))
os.environ.setdefault("LOG_DIR", os.path.join(_scratch, "logs"))
os.environ.setdefault(
    "DATABASE_URL", "sqlite+aiosqlite:///" + os.path.join(_scratch, "games.db")
)

# Ensure models are imported
from app.models import GameDocument  # noqa: E402, F401
from app.main import app  # noqa: E402
from app.routers.games import get_game_service  # noqa: E402
from app.services.file_intake import FileIntake  # noqa: E402
from app.services.game_service import GameService  # noqa: E402
from app.stores.memory import InMemoryGameStore  # noqa: E402

PLACEHOLDER = "images/placeholder.jpg"


@pytest.fixture(name="session_factory")
async def session_factory_fixture():
    """
    Creates an in-memory SQLite database and a session factory for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def memory_store():
    return InMemoryGameStore()


@pytest.fixture
def images_dir(tmp_path):
    return tmp_path / "public" / "images"


@pytest.fixture
def file_intake(images_dir):
    return FileIntake(images_dir, reference_prefix="images", timeout=5)


@pytest.fixture
def service(memory_store, file_intake):
    return GameService(memory_store, file_intake, default_img_reference=PLACEHOLDER)


@pytest.fixture
async def client(service):
    app.dependency_overrides[get_game_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def halo_form():
    return {
        "title": "Halo",
        "genre": "Shooter",
        "price": "59.99",
        "platform": "Xbox",
        "release_date": "2001",
        "description": "A classic shooter.",
    }
