"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import time
from uuid import UUID, uuid4

from src.api.models import (
    DeleteGameRequest,
    GamePageResponse,
    GameResponse,
    GetGameRequest,
    ListGamesRequest,
    MoveRequest,
    ResetGameRequest,
)
from src.core.config import get_settings
from src.core.exceptions import (
    ConcurrencyConflictError,
    GameNotFoundError,
    VersionConflictError,
)
from src.core.logging_config import get_logger
from src.core.models import GameModel
from src.core.shared_types import Status
from src.db.repository import GameRepository
from src.tictactoe.game import Game

logger = get_logger("game_service")


class GameService:
    """Orchestration of layers for tic-tac-toe games."""

    def __init__(
        self,
        repository: GameRepository,
        max_move_attempts: int | None = None,
        retry_backoff: float | None = None,
    ) -> None:
        """Retry policy defaults to the application settings."""
        settings = get_settings()
        self.repo = repository
        self.max_move_attempts = (
            settings.max_move_attempts if max_move_attempts is None else max_move_attempts
        )
        self.retry_backoff = (
            settings.retry_backoff_seconds if retry_backoff is None else retry_backoff
        )
        if self.max_move_attempts < 1:
            raise ValueError(
                f"max_move_attempts must be at least 1, got {self.max_move_attempts}"
            )

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        logger.info("Creating new game")
        new_game = Game.new_game().to_model(game_id=uuid4(), version=0)
        stored_game = self.repo.create_game(new_game)
        logger.info("Created new game with ID: %s", stored_game.game_id)
        return self._create_game_response(stored_game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        logger.debug("Fetching game with ID: %s", request.game_id)
        return self._create_game_response(self._fetch_game(request.game_id))

    def list_games(self, request: ListGamesRequest) -> GamePageResponse:
        logger.debug("Fetching games page=%s size=%s", request.page, request.size)
        games, total = self.repo.page_games(
            offset=request.page * request.size, limit=request.size
        )
        return GamePageResponse(
            items=[self._create_game_response(game) for game in games],
            page=request.page,
            size=request.size,
            total=total,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Apply a move with optimistic concurrency control.
        ----

        Every attempt starts from a fresh read and redoes the full validation,
        so a move that became illegal in the meantime fails instead of overwriting the other writer.
        Gives up with ConcurrencyConflictError after `max_move_attempts` lost races.
        """
        logger.info(
            "Making move for game %s: player=%s, row=%s, col=%s",
            request.game_id,
            request.player,
            request.row,
            request.col,
        )

        for attempt in range(1, self.max_move_attempts + 1):
            # Retrieve persisted GameModel from repository
            stored_model = self._fetch_game(request.game_id)

            # Compute the candidate (raises for illegal moves, nothing is written)
            game = Game.from_model(stored_model)
            after_move = game.play(request.row, request.col, request.player)
            candidate = after_move.to_model(
                game_id=stored_model.game_id, version=stored_model.version
            )

            try:
                committed = self.repo.commit_game(
                    candidate, expected_version=stored_model.version
                )
            except VersionConflictError:
                logger.warning(
                    "Optimistic lock conflict for game %s (attempt %s/%s)",
                    request.game_id,
                    attempt,
                    self.max_move_attempts,
                )
                if attempt < self.max_move_attempts:
                    time.sleep(self.retry_backoff)
                continue

            if committed is None:
                # deleted between the read and the commit
                raise GameNotFoundError(f"Game not found: {request.game_id}")

            self._log_outcome(committed)
            return self._create_game_response(committed)

        logger.error("Max retry attempts reached for game %s", request.game_id)
        raise ConcurrencyConflictError(
            f"Concurrent update detected for game {request.game_id}. Please retry."
        )

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Back to the initial state. Overwrites unconditionally, the version keeps counting."""
        stored_model = self._fetch_game(request.game_id)
        fresh = Game.from_model(stored_model).reset()

        reset_model = self.repo.overwrite_game(
            fresh.to_model(game_id=stored_model.game_id, version=stored_model.version)
        )
        if reset_model is None:
            raise GameNotFoundError(f"Game not found: {request.game_id}")

        logger.info("Game %s reset (version %s)", request.game_id, reset_model.version)
        return self._create_game_response(reset_model)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise GameNotFoundError(f"Game not found: {request.game_id}")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, model: GameModel) -> GameResponse:
        return GameResponse(
            game_id=model.game_id,
            board=model.board,
            next_player=model.next_player,
            status=model.status,
            version=model.version,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game not found: {game_id}")
        return game_model

    def _log_outcome(self, model: GameModel) -> None:
        if model.status in (Status.X_WON, Status.O_WON):
            logger.info("Game %s won: %s", model.game_id, model.status)
        elif model.status == Status.DRAW:
            logger.info("Game %s ended in a draw", model.game_id)
        else:
            logger.info("Move completed successfully for game %s", model.game_id)
