"""Application settings, read once from TICTACTOE_* environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache

ENV_PREFIX = "TICTACTOE_"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./tictactoe.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    # optimistic concurrency policy for moves
    max_move_attempts: int = 3
    retry_backoff_ms: int = 10

    # listing
    default_page_size: int = 20
    max_page_size: int = 100

    def __post_init__(self) -> None:
        if self.max_move_attempts < 1:
            raise ValueError(
                f"{ENV_PREFIX}MAX_MOVE_ATTEMPTS must be at least 1, got {self.max_move_attempts}"
            )
        if self.retry_backoff_ms < 0:
            raise ValueError(
                f"{ENV_PREFIX}RETRY_BACKOFF_MS must not be negative, got {self.retry_backoff_ms}"
            )

    @property
    def retry_backoff_seconds(self) -> float:
        return self.retry_backoff_ms / 1000


@lru_cache
def get_settings() -> Settings:
    return Settings(
        database_url=_env("DATABASE_URL", Settings.database_url),
        echo_sql=_env("ECHO_SQL", "0").lower() in ("1", "true", "yes"),
        log_level=_env("LOG_LEVEL", Settings.log_level).upper(),
        max_move_attempts=int(
            _env("MAX_MOVE_ATTEMPTS", str(Settings.max_move_attempts))
        ),
        retry_backoff_ms=int(_env("RETRY_BACKOFF_MS", str(Settings.retry_backoff_ms))),
        default_page_size=int(
            _env("DEFAULT_PAGE_SIZE", str(Settings.default_page_size))
        ),
        max_page_size=int(_env("MAX_PAGE_SIZE", str(Settings.max_page_size))),
    )
