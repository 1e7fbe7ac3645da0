"""Pytest configuration for test isolation.

The CLI and ``load_settings`` read ``CATEGORY_SUGGEST_*`` variables and the
CLI loads a ``.env`` from the working directory. To keep tests hermetic, each
test runs from its own temporary directory with those variables cleared, and
the package logger is reset afterwards so handlers bound to captured streams
do not leak between tests.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Make sure the workspace `packages/` dir is on sys.path so `category_suggest` is importable
_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR), str(_ROOT)] if p not in sys.path]

from category_suggest.logging_setup import reset_logging  # noqa: E402

_ENV_VARS = (
    "CATEGORY_SUGGEST_LOG_LEVEL",
    "CATEGORY_SUGGEST_MAX_MATCHES",
    "CATEGORY_SUGGEST_RECENT_LIMIT",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()
