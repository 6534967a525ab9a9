"""Protocol repository: the persistence collaborator the service depends on."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def create_game(self, game: GameModel) -> GameModel:
        """Store a new game (its ID is assigned by the caller) at version 0."""
        ...

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def commit_game(self, game: GameModel, expected_version: int) -> GameModel | None:
        """
        Write `game` only if the stored version still equals `expected_version` (one atomic operation).

        Returns the stored game (version + 1), None if the record does not exist,
        raises VersionConflictError if another writer committed first.
        """
        ...

    def overwrite_game(self, game: GameModel) -> GameModel | None:
        """Write `game` whatever the stored version. Still bumps the version."""
        ...

    def exists(self, game_id: UUID) -> bool: ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...

    def page_games(self, offset: int, limit: int) -> tuple[list[GameModel], int]:
        """Games ordered by creation time, plus the total number of games."""
        ...
