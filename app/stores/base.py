"""Storage protocol for game records.

Handlers talk to this interface only, so the in-memory and database
backends can be swapped through configuration.
"""

from typing import Any, List, Optional, Protocol

from app.models import Game, GameFields


class GameStore(Protocol):
    """Protocol every game store backend implements.

    Lookups of unknown ids raise GameNotFoundError; failures of the
    backend itself raise a BackendError subclass, never GameNotFoundError.
    """

    def parse_id(self, raw: str) -> Optional[Any]:
        """Convert a path parameter into this store's id type, or None if it cannot be one."""
        ...

    async def list(self) -> List[Game]:
        """Return all games in a stable order."""
        ...

    async def get(self, game_id: Any) -> Game:
        ...

    async def create(self, fields: GameFields, img_reference: str) -> Game:
        """Persist a new game; the store assigns the id."""
        ...

    async def replace(
        self, game_id: Any, fields: GameFields, img_reference: Optional[str] = None
    ) -> Game:
        """Replace every validated field. A None img_reference keeps the stored one."""
        ...

    async def delete(self, game_id: Any) -> Game:
        """Remove a game and return it as it was."""
        ...
