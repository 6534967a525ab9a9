"""Logging for the service: a single stderr handler on the `tictactoe` logger."""

import logging
import sys

LOGGER_NAME = "tictactoe"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(component)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class PlainFormatter(logging.Formatter):
    """Fills in `component` for records that were not logged through get_logger()."""

    def __init__(self) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.component = getattr(record, "component", "-")
        return super().format(record)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """(Re)configure the package logger. Safe to call more than once."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(PlainFormatter())
    logger.addHandler(handler)

    return logger


def get_logger(component: str) -> logging.LoggerAdapter:
    """LoggerAdapter tagging every record with the component that emitted it."""
    return logging.LoggerAdapter(
        logging.getLogger(f"{LOGGER_NAME}.{component}"), {"component": component}
    )
