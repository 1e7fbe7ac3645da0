"""Category vocabulary and ordered-uniqueness helpers.

The canonical list is the fixed, ordered fallback set used to pad heuristic
suggestions. Its order is part of the contract: padding always takes the
first entries not already suggested.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)

TECHNOLOGY = "Technology"
HUMAN_RESOURCES = "Human Resources"
MARKETING = "Marketing & Advertising"
OFFICE_SUPPLIES = "Office Supplies"
TRAVEL = "Travel & Expenses"
REVENUE = "Revenue"
MAJOR_EXPENSE = "Major Expense"
GENERAL = "General"

CANONICAL_CATEGORIES: tuple[str, ...] = (
    TECHNOLOGY,
    HUMAN_RESOURCES,
    MARKETING,
    OFFICE_SUPPLIES,
    TRAVEL,
    REVENUE,
    MAJOR_EXPENSE,
    GENERAL,
)

DEPARTMENTS: tuple[str, ...] = ("finance", "hr", "it", "marketing", "operations", "sales")


def unique_in_order(items: Iterable[T]) -> list[T]:
    """Drop later duplicates, keeping the first occurrence of each item."""

    seen: set[T] = set()
    out: list[T] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


def fill_unique(preferred: Iterable[T], pool: Iterable[T], size: int) -> list[T]:
    """Return exactly ``size`` unique items when the inputs allow it.

    ``preferred`` is deduplicated first (first occurrence wins), then entries
    of ``pool`` not yet present are appended in pool order until ``size`` is
    reached. The result is truncated to ``size``; it is shorter only when
    ``preferred`` and ``pool`` together hold fewer than ``size`` distinct items.
    """

    if size <= 0:
        return []
    out = unique_in_order(preferred)
    if len(out) < size:
        present = set(out)
        for item in pool:
            if item in present:
                continue
            out.append(item)
            present.add(item)
            if len(out) >= size:
                break
    return out[:size]


__all__ = [
    "CANONICAL_CATEGORIES",
    "DEPARTMENTS",
    "GENERAL",
    "HUMAN_RESOURCES",
    "MAJOR_EXPENSE",
    "MARKETING",
    "OFFICE_SUPPLIES",
    "REVENUE",
    "TECHNOLOGY",
    "TRAVEL",
    "fill_unique",
    "unique_in_order",
]
