"""Logging capability injected into API clients."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, runtime_checkable

from loguru import logger

from rest_harness.settings import get_settings

CONSOLE_FORMAT = "<level>{level: <8}</level> <cyan>{extra[client]}</cyan> {message}"


@runtime_checkable
class ClientLogger(Protocol):
    """Leveled sink for pre-formatted client messages."""

    def debug(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoguruClientLogger:
    """ClientLogger backed by loguru, tagging every record with the client name.

    Messages are passed through ``bind`` without positional or keyword arguments,
    so loguru never runs ``str.format`` over them and serialized payloads with
    braces are logged verbatim.
    """

    def __init__(self, name: str = "api") -> None:
        self.name = name
        self._logger = logger.bind(client=name)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


def configure_logging(level: Optional[str] = None) -> int:
    """Replace loguru's default sink with a level-first, colorized console sink.

    Without an explicit level the configured ``LOG_LEVEL`` applies.

    Returns the handler id so callers (usually a test session hook) can remove it.
    """

    level = level or get_settings().log_level
    logger.remove()
    logger.configure(extra={"client": "-"})
    return logger.add(sys.stderr, level=level.upper(), colorize=True, format=CONSOLE_FORMAT)
