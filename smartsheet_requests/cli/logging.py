"""
Logging setup for the CLI.

The library itself only emits records; handlers are installed here, on stderr,
and removed again when the command finishes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "smartsheet_requests"


@dataclass(frozen=True, slots=True)
class LoggingState:
    level: int
    handlers: tuple[logging.Handler, ...]
    propagate: bool


def _level_for(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, verbosity: int) -> LoggingState:
    """Install a stderr handler on the package logger; return the state to restore."""
    logger = logging.getLogger(_LOGGER_NAME)
    previous = LoggingState(
        level=logger.level,
        handlers=tuple(logger.handlers),
        propagate=logger.propagate,
    )
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger.handlers = [handler]
    logger.setLevel(_level_for(verbosity))
    logger.propagate = False
    return previous


def restore_logging(state: LoggingState) -> None:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.handlers = list(state.handlers)
    logger.setLevel(state.level)
    logger.propagate = state.propagate
