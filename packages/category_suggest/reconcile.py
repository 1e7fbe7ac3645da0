"""Reconcile predictor matches into a short, duplicate-free suggestion list.

The predictor ranks past transactions by similarity, so several matches often
share a category. The reconciler keeps one match per category, in the order
categories first appear, and caps the list.

Selection is stable: the kept match is the FIRST one seen for its category,
not the one with the highest ``similarity_score``.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import SuggestionMatch

MAX_REMOTE_SUGGESTIONS = 5


def reconcile(
    matches: Iterable[SuggestionMatch], *, limit: int = MAX_REMOTE_SUGGESTIONS
) -> list[SuggestionMatch]:
    """Return at most ``limit`` matches with pairwise distinct categories.

    Parameters
    ----------
    matches:
        Predictor matches in the order returned by the service.
    limit:
        Maximum number of distinct categories to keep (default 5).

    Returns
    -------
    list[SuggestionMatch]
        The first match for each of the first ``limit`` distinct categories,
        in first-seen order. Empty input yields an empty list.
    """

    if limit <= 0:
        return []

    first_by_category: dict[str, SuggestionMatch] = {}
    for match in matches:
        if match.category in first_by_category:
            continue
        first_by_category[match.category] = match
        if len(first_by_category) >= limit:
            break
    return list(first_by_category.values())


def categories_of(matches: Iterable[SuggestionMatch]) -> list[str]:
    """Category labels of ``matches`` in order, for display."""

    return [m.category for m in matches]


__all__ = ["MAX_REMOTE_SUGGESTIONS", "categories_of", "reconcile"]
