"""
Centralized logging configuration for BookQL.

Every module logs through `get_logger(__name__)`, which lands under the
`bookql` namespace. The level comes from BOOKQL_LOG_LEVEL unless a command
line entry point overrides it with `setup_logging(level=...)`.
"""

import logging
import sys
from typing import Optional, Union

from bookql.core.constants import LOG_LEVEL

ROOT_LOGGER_NAME = "bookql"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"

# Third-party loggers that only ever add noise at INFO
QUIET_LOGGERS = ("httpx", "httpcore")

_initialized = False


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure BookQL logging.

    The first call installs a stdout handler on the `bookql` logger.
    Later calls only change the level, and only when one is passed.
    """
    global _initialized

    bookql_logger = logging.getLogger(ROOT_LOGGER_NAME)

    if _initialized:
        if level is not None:
            bookql_logger.setLevel(_resolve_level(level))
        return bookql_logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or LOG_FORMAT))
    bookql_logger.addHandler(handler)
    bookql_logger.setLevel(_resolve_level(level if level is not None else LOG_LEVEL))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _initialized = True
    return bookql_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.
    Initializes logging on first call.
    """
    setup_logging()
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
