"""Logging configuration for the Zarathustrov package."""

from __future__ import annotations

import logging
from typing import Optional, Union

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_NOISY_LOGGERS = ("urllib3",)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = logging.INFO, handler: Optional[logging.Handler] = None) -> None:
    """Configure root logging with a consistent format.

    HTTP connection chatter from ``urllib3`` is kept at WARNING unless debug
    logging was requested.
    """
    numeric = _resolve_level(level)
    logging.basicConfig(level=numeric, format=_DEFAULT_FORMAT, handlers=[handler] if handler else None)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(numeric if numeric <= logging.DEBUG else max(numeric, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured for the given ``name``."""
    return logging.getLogger(name)
