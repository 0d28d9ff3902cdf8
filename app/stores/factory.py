import logging

from app.settings import Settings
from app.stores.base import GameStore
from app.stores.database_store import DatabaseGameStore
from app.stores.memory import InMemoryGameStore
from app.stores.sample_games import SAMPLE_GAMES

logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> GameStore:
    """Build the game store selected by STORE_BACKEND."""
    backend = settings.STORE_BACKEND.lower()

    if backend == "memory":
        initial = SAMPLE_GAMES if settings.SEED_SAMPLE_GAMES else []
        logger.info(f"Using in-memory game store ({len(initial)} sample games)")
        return InMemoryGameStore(initial)

    if backend == "database":
        # Imported lazily so the memory backend never opens an engine
        from app.database import AsyncSessionLocal

        logger.info("Using database game store")
        return DatabaseGameStore(AsyncSessionLocal, timeout=settings.IO_TIMEOUT_SECONDS)

    raise ValueError(
        f"Unknown STORE_BACKEND '{settings.STORE_BACKEND}' (expected 'memory' or 'database')"
    )
