from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
import logging
import os
from app.settings import settings

logger = logging.getLogger(__name__)

SQLITE_PREFIX = "sqlite+aiosqlite:///"

# Ensure data directory exists for file-backed SQLite
if settings.DATABASE_URL.startswith(SQLITE_PREFIX):
    db_dir = os.path.dirname(settings.DATABASE_URL.replace(SQLITE_PREFIX, ""))
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)


engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)
AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db():
    # Import so SQLModel knows about the table before create_all
    from app.models import GameDocument  # noqa: F401

    logger.info("Creating database tables if missing...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
