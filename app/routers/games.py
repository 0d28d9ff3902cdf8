from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from typing import Any, Dict, List, Optional, Tuple
from app.models import Game
from app.services.game_service import GameService

router = APIRouter(prefix="/api/games", tags=["games"])


def get_game_service(request: Request) -> GameService:
    return request.app.state.game_service


def game_form(
    title: Optional[str] = Form(None),
    genre: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    platform: Optional[str] = Form(None),
    release_date: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
) -> Dict[str, Any]:
    # Everything arrives as text; the validator owns coercion and rules
    return {
        "title": title,
        "genre": genre,
        "price": price,
        "platform": platform,
        "release_date": release_date,
        "description": description,
    }


async def read_image(
    img: Optional[UploadFile] = File(None),
) -> Tuple[Optional[bytes], Optional[str]]:
    if img is None or not img.filename:
        return None, None
    try:
        return await img.read(), img.filename
    finally:
        await img.close()


@router.get("", response_model=List[Game])
@router.get("/", response_model=List[Game], include_in_schema=False)
async def list_games(service: GameService = Depends(get_game_service)):
    return await service.list_games()


@router.get("/{game_id}", response_model=Game)
async def get_game(game_id: str, service: GameService = Depends(get_game_service)):
    return await service.get_game(game_id)


@router.post("", response_model=Game, status_code=201)
async def create_game(
    form: Dict[str, Any] = Depends(game_form),
    image: Tuple[Optional[bytes], Optional[str]] = Depends(read_image),
    service: GameService = Depends(get_game_service),
):
    """
    Create a game from form fields, with an optional cover image in `img`.
    """
    data, name = image
    return await service.create_game(form, data, name)


@router.put("/{game_id}", response_model=Game)
async def replace_game(
    game_id: str,
    form: Dict[str, Any] = Depends(game_form),
    image: Tuple[Optional[bytes], Optional[str]] = Depends(read_image),
    service: GameService = Depends(get_game_service),
):
    """
    Replace every field of a game. The stored image is kept unless a new one is sent.
    """
    data, name = image
    return await service.replace_game(game_id, form, data, name)


@router.delete("/{game_id}", response_model=Game)
async def delete_game(game_id: str, service: GameService = Depends(get_game_service)):
    return await service.delete_game(game_id)
