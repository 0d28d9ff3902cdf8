import logging
from typing import Any, Dict, List, Optional

from app.exceptions import BackendError, GameNotFoundError
from app.models import Game
from app.services.file_intake import FileIntake
from app.services.validator import parse_game
from app.stores.base import GameStore

logger = logging.getLogger(__name__)


class GameService:
    """
    Read and write pipeline for games.

    Writes run validate -> store image -> persist, so a rejected payload
    never leaves a file behind and the persisted img_reference is settled
    within the same request.
    """

    def __init__(
        self,
        store: GameStore,
        file_intake: FileIntake,
        default_img_reference: str = "images/placeholder.jpg",
    ):
        self.store = store
        self.file_intake = file_intake
        self.default_img_reference = default_img_reference

    def _parse_id(self, raw_id: str) -> Any:
        game_id = self.store.parse_id(raw_id)
        if game_id is None:
            raise GameNotFoundError(raw_id)
        return game_id

    async def list_games(self) -> List[Game]:
        logger.info("Fetching all games")
        return await self.store.list()

    async def get_game(self, raw_id: str) -> Game:
        return await self.store.get(self._parse_id(raw_id))

    async def create_game(
        self,
        form: Dict[str, Any],
        image: Optional[bytes] = None,
        image_name: Optional[str] = None,
    ) -> Game:
        fields = parse_game(form)
        reference = await self.file_intake.store(image, image_name)
        try:
            return await self.store.create(
                fields, reference or self.default_img_reference
            )
        except BackendError:
            if reference:
                logger.warning(f"Image {reference} left without a game record")
            raise

    async def replace_game(
        self,
        raw_id: str,
        form: Dict[str, Any],
        image: Optional[bytes] = None,
        image_name: Optional[str] = None,
    ) -> Game:
        game_id = self._parse_id(raw_id)
        fields = parse_game(form)
        if image is not None:
            # Unknown ids are rejected before anything is written to disk
            await self.store.get(game_id)
        reference = await self.file_intake.store(image, image_name)
        try:
            return await self.store.replace(game_id, fields, reference)
        except (BackendError, GameNotFoundError):
            if reference:
                logger.warning(f"Image {reference} left without a game record")
            raise

    async def delete_game(self, raw_id: str) -> Game:
        return await self.store.delete(self._parse_id(raw_id))
