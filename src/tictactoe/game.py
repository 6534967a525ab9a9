"""
The Game class is the entrypoint into the domain layer for the service layer.

A Game is immutable: playing a move or resetting returns a new Game (the candidate),
so a failed commit never leaves a half-applied state behind.
"""

from dataclasses import dataclass, replace
from typing import Self
from uuid import UUID

from src.core.exceptions import GameFinishedError, GameStateError, InvalidMoveError
from src.core.models import GameModel
from src.core.shared_types import Mark, Player, Status
from src.tictactoe.board import (
    EMPTY_BOARD,
    has_won,
    is_draw,
    is_valid_board,
    mark_of,
    opposite,
    set_at,
    to_index,
    within_bounds,
)

WINNING_STATUS = {Player.X: Status.X_WON, Player.O: Status.O_WON}
STATUS_VALUES = frozenset(status.value for status in Status)
PLAYER_VALUES = frozenset(player.value for player in Player)


@dataclass(frozen=True)
class Game:
    board: str
    next_player: Player
    status: Status

    @classmethod
    def new_game(cls) -> Self:
        return cls(board=EMPTY_BOARD, next_player=Player.X, status=Status.IN_PROGRESS)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild the game from persisted data, refusing records that cannot be a game."""
        if not is_valid_board(model.board):
            raise GameStateError(f"Invalid board: {model.board!r}")
        if model.status not in STATUS_VALUES:
            raise GameStateError(f"Invalid status code: {model.status!r}")
        if model.next_player not in PLAYER_VALUES:
            raise GameStateError(f"Invalid next player: {model.next_player!r}")
        return cls(
            board=model.board,
            next_player=Player(model.next_player),
            status=Status(model.status),
        )

    def to_model(self, game_id: UUID, version: int) -> GameModel:
        return GameModel(
            game_id=game_id,
            board=self.board,
            next_player=self.next_player,
            status=self.status,
            version=version,
        )

    @property
    def is_finished(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def play(self, row: int, col: int, player: Player) -> Self:
        """
        Validate a move and return the game after it.
        ----

        Checks run in a fixed order, the first one failing wins:
        1. (row, col) on the board
        2. game still in progress
        3. player's turn
        4. cell empty
        """
        self._assert_move_allowed(row, col, player)

        board = set_at(self.board, to_index(row, col), mark_of(player))

        # a full board that completes a line is a win, never a draw
        if has_won(board, mark_of(player)):
            return replace(self, board=board, status=WINNING_STATUS[player])
        if is_draw(board):
            return replace(self, board=board, status=Status.DRAW)
        return replace(self, board=board, next_player=opposite(player))

    def reset(self) -> Self:
        return type(self).new_game()

    # -- PRIVATE HELPERS ---
    def _assert_move_allowed(self, row: int, col: int, player: Player) -> None:
        if not within_bounds(row, col):
            raise InvalidMoveError(f"Row/col out of bounds: ({row}, {col})")

        if self.is_finished:
            raise GameFinishedError(f"Game already finished with status: {self.status}")

        if player != self.next_player:
            raise InvalidMoveError(
                f"Invalid turn. Expected: {self.next_player}, got: {player}"
            )

        if self.board[to_index(row, col)] != Mark.EMPTY:
            raise InvalidMoveError(f"Cell ({row}, {col}) is occupied")
