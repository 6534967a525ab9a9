"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and domain/db layers (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass
from uuid import UUID

from src.core.shared_types import Player, Status


@dataclass(frozen=True)
class GameModel:
    """Transport-safe, versioned representation of a game."""

    game_id: UUID
    board: str
    next_player: Player
    status: Status
    version: int
