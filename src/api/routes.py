"""HTTP endpoints. Each one maps to exactly one GameService operation."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_service
from src.api.models import (
    DeleteGameRequest,
    GamePageResponse,
    GameResponse,
    GetGameRequest,
    ListGamesRequest,
    MovePayload,
    MoveRequest,
    ResetGameRequest,
)
from src.core.config import get_settings
from src.services.game_service import GameService

router = APIRouter(prefix="/api/v1/games", tags=["games"])


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(service: GameService = Depends(get_service)) -> GameResponse:
    return service.create_new_game()


@router.get("", response_model=GamePageResponse)
def list_games(
    page: int = 0,
    size: int = get_settings().default_page_size,
    service: GameService = Depends(get_service),
) -> GamePageResponse:
    return service.list_games(ListGamesRequest(page=page, size=size))


@router.get("/{game_id}", response_model=GameResponse)
def get_game(game_id: UUID, service: GameService = Depends(get_service)) -> GameResponse:
    return service.get_game(GetGameRequest(game_id=game_id))


@router.post("/{game_id}/moves", response_model=GameResponse)
def make_move(
    game_id: UUID, payload: MovePayload, service: GameService = Depends(get_service)
) -> GameResponse:
    return service.make_move(MoveRequest(game_id=game_id, **payload.model_dump()))


@router.post("/{game_id}/reset", response_model=GameResponse)
def reset_game(
    game_id: UUID, service: GameService = Depends(get_service)
) -> GameResponse:
    return service.reset_game(ResetGameRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: GameService = Depends(get_service)) -> Response:
    service.delete_game(DeleteGameRequest(game_id=game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
