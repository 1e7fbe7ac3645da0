"""Logging for the ``category_suggest`` package.

Library modules log through :func:`get_logger` and stay silent (a
``NullHandler`` on the package logger) until an entrypoint calls
:func:`configure_logging`. The CLI does so from its root callback with the
level from :func:`category_suggest.config.load_settings`.
"""

from __future__ import annotations

import logging
from typing import IO

from .config import load_settings

_PKG_LOGGER_NAME = "category_suggest"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Stream handler installed by configure_logging; None while unconfigured.
_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def configure_logging(
    level: int | None = None, *, stream: IO[str] | None = None
) -> logging.Handler:
    """Send package logs to ``stream`` (stderr by default).

    Only the first call installs a handler; later calls return it unchanged.
    ``level`` defaults to ``CATEGORY_SUGGEST_LOG_LEVEL`` via the settings.
    """

    global _handler
    if _handler is not None:
        return _handler

    resolved = load_settings().log_level if level is None else level
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(resolved)
    # The package handler is the only sink once configured.
    logger.propagate = False

    _handler = handler
    return handler


def reset_logging() -> None:
    """Undo :func:`configure_logging` (tests, hosts that reconfigure at runtime)."""

    global _handler
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _handler = None
