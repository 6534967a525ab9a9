"""
Custom exceptions.

Every exception raised on purpose by this package derives from GameError.
The `kind` code lets the API layer tell them apart without importing every class.
"""


class GameError(Exception):
    kind = "GAME_ERROR"


# --- Client errors: never retried, game state is left unchanged ---
class GameNotFoundError(GameError):
    kind = "GAME_NOT_FOUND"


class InvalidMoveError(GameError):
    kind = "INVALID_MOVE"


class GameFinishedError(GameError):
    kind = "GAME_FINISHED"


class InvalidRequestError(GameError):
    kind = "INVALID_REQUEST"


# --- Concurrency ---
class VersionConflictError(GameError):
    """Stored version no longer matches the version the candidate was computed from."""

    kind = "VERSION_CONFLICT"


class ConcurrencyConflictError(GameError):
    """Optimistic retries exhausted. The caller may try again."""

    kind = "CONCURRENCY_CONFLICT"


# --- Server errors ---
class GameStateError(GameError):
    """A persisted record cannot be interpreted as a game."""

    kind = "GAME_STATE_ERROR"
