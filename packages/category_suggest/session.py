"""Suggestion-panel state transitions for a draft transaction.

Every transition returns a new :class:`~category_suggest.models.SuggestionSession`;
inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .heuristics import suggest
from .models import DraftTransaction, SuggestionMatch, SuggestionSession
from .reconcile import MAX_REMOTE_SUGGESTIONS, categories_of, reconcile


def new_session(draft: DraftTransaction | None = None) -> SuggestionSession:
    return SuggestionSession(draft=draft if draft is not None else DraftTransaction())


def update_draft(session: SuggestionSession, **fields: object) -> SuggestionSession:
    """Apply user edits to the draft (e.g. ``notes="taxi"``)."""

    return replace(session, draft=replace(session.draft, **fields))


def open_with_matches(
    session: SuggestionSession,
    matches: Iterable[SuggestionMatch],
    *,
    limit: int = MAX_REMOTE_SUGGESTIONS,
) -> SuggestionSession:
    """Show the panel with reconciled predictor matches."""

    return replace(session, visible=True, remote_matches=tuple(reconcile(matches, limit=limit)))


def open_with_fallback(session: SuggestionSession) -> SuggestionSession:
    """Show the panel with no remote matches, so local suggestions render."""

    return replace(session, visible=True, remote_matches=())


def session_options(session: SuggestionSession) -> list[str]:
    if session.remote_matches:
        return categories_of(session.remote_matches)
    return suggest(session.draft)


def select_suggestion(session: SuggestionSession, category: str) -> SuggestionSession:
    """Write ``category`` into the draft and hide the panel.

    No validation happens here; any string, including one not on offer, is
    accepted.
    """

    return replace(session, draft=replace(session.draft, category=category), visible=False)


def reset_session() -> SuggestionSession:
    """Empty state used after a transaction is submitted successfully."""

    return SuggestionSession()


__all__ = [
    "new_session",
    "open_with_fallback",
    "open_with_matches",
    "reset_session",
    "select_suggestion",
    "session_options",
    "update_draft",
]
