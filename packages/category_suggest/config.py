"""Environment-driven settings for ``category_suggest`` entrypoints.

Library functions take explicit arguments; only the CLI (or a host
application) resolves defaults from the environment through
:func:`load_settings`. The CLI loads a ``.env`` from the working directory
beforehand without overriding variables that are already set.

Variables
---------
``CATEGORY_SUGGEST_LOG_LEVEL``
    Logging level name or number used by the CLI (default INFO).
``CATEGORY_SUGGEST_MAX_MATCHES``
    Cap on reconciled predictor suggestions (default 5).
``CATEGORY_SUGGEST_RECENT_LIMIT``
    Number of recent transactions in the dashboard summary (default 3).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .dashboard import DEFAULT_RECENT_LIMIT
from .reconcile import MAX_REMOTE_SUGGESTIONS


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: int = logging.INFO
    max_matches: int = MAX_REMOTE_SUGGESTIONS
    recent_limit: int = DEFAULT_RECENT_LIMIT


def _positive_int(raw: str | None, default: int) -> int:
    """Parse a positive integer, falling back to ``default`` on anything else."""

    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _log_level(raw: str | None) -> int:
    """Resolve a level name (any case) or number; unknown values mean INFO."""

    if raw is None or not raw.strip():
        return logging.INFO
    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_log_level(env.get("CATEGORY_SUGGEST_LOG_LEVEL")),
        max_matches=_positive_int(env.get("CATEGORY_SUGGEST_MAX_MATCHES"), MAX_REMOTE_SUGGESTIONS),
        recent_limit=_positive_int(env.get("CATEGORY_SUGGEST_RECENT_LIMIT"), DEFAULT_RECENT_LIMIT),
    )


__all__ = ["Settings", "load_settings"]
