"""
Rules that only concern the board: a row-major string of 9 cells.

Pure functions, no state. Inputs outside the documented domain are the caller's responsibility.
"""

from src.core.shared_types import Mark, Player

BOARD_SIZE = 3
EMPTY_BOARD = Mark.EMPTY * (BOARD_SIZE * BOARD_SIZE)
VALID_CELLS = frozenset(mark.value for mark in Mark)

# 3 rows, 3 columns, 2 diagonals
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def to_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def within_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def set_at(board: str, index: int, mark: Mark) -> str:
    """New board with `mark` at `index`. Does NOT check whether the cell was empty."""
    return board[:index] + mark + board[index + 1 :]


def has_won(board: str, mark: Mark) -> bool:
    return any(all(board[i] == mark for i in line) for line in WINNING_LINES)


def is_draw(board: str) -> bool:
    """Board is full. Says nothing about a winner: check has_won() first."""
    return Mark.EMPTY not in board


def mark_of(player: Player) -> Mark:
    return Mark.X if player == Player.X else Mark.O


def opposite(player: Player) -> Player:
    return Player.O if player == Player.X else Player.X


def is_valid_board(board: str) -> bool:
    """Structural check used when reading a board back from storage."""
    return len(board) == BOARD_SIZE * BOARD_SIZE and all(
        cell in VALID_CELLS for cell in board
    )
