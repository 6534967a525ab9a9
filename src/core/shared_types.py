"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    X_WON = "X_WON"
    O_WON = "O_WON"
    DRAW = "DRAW"


class Player(StrEnum):
    X = "X"
    O = "O"  # noqa: E741


# --- A Mark is what ends up in a cell of the board. Unlike Player it includes the empty cell.
class Mark(StrEnum):
    EMPTY = "_"
    X = "X"
    O = "O"  # noqa: E741
