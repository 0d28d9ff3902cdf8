import asyncio
import logging
import re
import uuid
from typing import Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.exceptions import GameNotFoundError, StorageUnavailableError
from app.models import Game, GameDocument, GameFields

logger = logging.getLogger(__name__)

T = TypeVar("T")

DOCUMENT_ID = re.compile(r"^[0-9a-f]{32}$")


class DatabaseGameStore:
    """
    Game store backed by the `games` table. Each call opens its own session
    and commits before returning; no transaction spans two calls.
    """

    def __init__(
        self, session_factory: Callable[[], AsyncSession], timeout: float = 10.0
    ):
        self.session_factory = session_factory
        self.timeout = timeout

    def parse_id(self, raw: str) -> Optional[str]:
        if raw is None:
            return None
        raw = raw.strip().lower()
        return raw if DOCUMENT_ID.match(raw) else None

    async def _run(self, operation: str, work: Callable[[], Awaitable[T]]) -> T:
        """
        Run one store operation under the I/O timeout, translating backend
        failures into StorageUnavailableError. GameNotFoundError passes through.
        """
        try:
            return await asyncio.wait_for(work(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"Database {operation} timed out after {self.timeout}s")
            raise StorageUnavailableError(operation, "timed out")
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database {operation} failed: {e}", exc_info=True)
            raise StorageUnavailableError(operation, str(e))

    @staticmethod
    async def _find(session: AsyncSession, game_id: str) -> Optional[GameDocument]:
        stmt = select(GameDocument).where(GameDocument.id == game_id)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def list(self) -> List[Game]:
        async def work():
            async with self.session_factory() as session:
                stmt = select(GameDocument).order_by(GameDocument.seq)
                result = await session.execute(stmt)
                return [doc.to_game() for doc in result.scalars().all()]

        return await self._run("list", work)

    async def get(self, game_id: str) -> Game:
        async def work():
            async with self.session_factory() as session:
                doc = await self._find(session, game_id)
                if doc is None:
                    raise GameNotFoundError(game_id)
                return doc.to_game()

        return await self._run("get", work)

    async def create(self, fields: GameFields, img_reference: str) -> Game:
        async def work():
            async with self.session_factory() as session:
                doc = GameDocument(
                    id=uuid.uuid4().hex,
                    img_reference=img_reference,
                    **fields.model_dump(),
                )
                session.add(doc)
                await session.commit()
                await session.refresh(doc)
                return doc.to_game()

        game = await self._run("create", work)
        logger.info(f"Created game {game.id} ({game.title})")
        return game

    async def replace(
        self, game_id: str, fields: GameFields, img_reference: Optional[str] = None
    ) -> Game:
        async def work():
            async with self.session_factory() as session:
                doc = await self._find(session, game_id)
                if doc is None:
                    raise GameNotFoundError(game_id)
                for name, value in fields.model_dump().items():
                    setattr(doc, name, value)
                if img_reference:
                    doc.img_reference = img_reference
                session.add(doc)
                await session.commit()
                await session.refresh(doc)
                return doc.to_game()

        game = await self._run("replace", work)
        logger.info(f"Replaced game {game_id}")
        return game

    async def delete(self, game_id: str) -> Game:
        async def work():
            async with self.session_factory() as session:
                doc = await self._find(session, game_id)
                if doc is None:
                    raise GameNotFoundError(game_id)
                game = doc.to_game()
                await session.delete(doc)
                await session.commit()
                return game

        game = await self._run("delete", work)
        logger.info(f"Deleted game {game_id}")
        return game
