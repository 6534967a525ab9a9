"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.config import get_settings
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player, Status


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class ListGamesRequest(BaseModel):
    page: int = 0
    size: int = get_settings().default_page_size

    @field_validator("page")
    @classmethod
    def validate_page(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Page index must be >= 0, got {value}.")
        return value

    @field_validator("size")
    @classmethod
    def validate_size(cls, value: int) -> int:
        max_page_size = get_settings().max_page_size
        if not 1 <= value <= max_page_size:
            raise InvalidRequestError(
                f"Page size must be between 1 and {max_page_size}, got {value}."
            )
        return value


class MovePayload(BaseModel):
    """Body of a move request. Bounds are checked by the game, not here."""

    row: int
    col: int
    player: Player


class MoveRequest(MovePayload):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: str
    next_player: Player
    status: Status
    version: int


class GamePageResponse(BaseModel):
    items: list[GameResponse]
    page: int
    size: int
    total: int
