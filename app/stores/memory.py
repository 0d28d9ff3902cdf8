"""In-memory game store.

Games live in an insertion-ordered dict keyed by integer id. All
mutations go through a single asyncio.Lock, so concurrent creates can
never compute the same id and read-modify-write sequences are not lost.
"""

import asyncio
import logging
from typing import Dict, Iterable, List, Optional

from app.exceptions import GameNotFoundError
from app.models import Game, GameFields

logger = logging.getLogger(__name__)


class InMemoryGameStore:
    def __init__(self, initial: Iterable[Game] = ()) -> None:
        self._games: Dict[int, Game] = {}
        self._lock = asyncio.Lock()
        for game in initial:
            self._games[int(game.id)] = game.model_copy()
        # Monotonic: an id is never handed out again after deletion
        self._next_id = max(self._games, default=0) + 1

    def parse_id(self, raw: str) -> Optional[int]:
        try:
            return int(raw)
        except (TypeError, ValueError):
            return None

    def _require(self, game_id: int) -> Game:
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    async def list(self) -> List[Game]:
        return [game.model_copy() for game in self._games.values()]

    async def get(self, game_id: int) -> Game:
        return self._require(game_id).model_copy()

    async def create(self, fields: GameFields, img_reference: str) -> Game:
        async with self._lock:
            game_id = self._next_id
            self._next_id += 1
            game = Game(id=game_id, img_reference=img_reference, **fields.model_dump())
            self._games[game_id] = game
        logger.info(f"Created game {game_id} ({game.title})")
        return game.model_copy()

    async def replace(
        self, game_id: int, fields: GameFields, img_reference: Optional[str] = None
    ) -> Game:
        async with self._lock:
            current = self._require(game_id)
            game = Game(
                id=game_id,
                img_reference=img_reference or current.img_reference,
                **fields.model_dump(),
            )
            self._games[game_id] = game
        logger.info(f"Replaced game {game_id}")
        return game.model_copy()

    async def delete(self, game_id: int) -> Game:
        async with self._lock:
            game = self._require(game_id)
            del self._games[game_id]
        logger.info(f"Deleted game {game_id}")
        return game
