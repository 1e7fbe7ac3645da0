"""Local, rule-based category suggestions for a draft transaction.

Three fixed rules each contribute one candidate (department, type/amount,
notes keywords). Candidates are deduplicated and padded from
:data:`~category_suggest.categories.CANONICAL_CATEGORIES` so the caller always
receives exactly three distinct options. Nothing here performs I/O or raises
for any draft.
"""

from __future__ import annotations

import math
import re

from .categories import (
    CANONICAL_CATEGORIES,
    GENERAL,
    HUMAN_RESOURCES,
    MAJOR_EXPENSE,
    MARKETING,
    OFFICE_SUPPLIES,
    REVENUE,
    TECHNOLOGY,
    TRAVEL,
    fill_unique,
)
from .models import AmountInput, DraftTransaction

SUGGESTION_COUNT = 3
MAJOR_EXPENSE_THRESHOLD = 1000.0

_DEPARTMENT_CATEGORIES: dict[str, str] = {
    "it": TECHNOLOGY,
    "hr": HUMAN_RESOURCES,
    "marketing": MARKETING,
    "finance": OFFICE_SUPPLIES,
}

# Ordering matters: earlier keyword groups win.
_NOTE_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("travel", "trip"), TRAVEL),
    (("software", "hardware"), TECHNOLOGY),
)

# Leading float literal; trailing characters are ignored.
_LEADING_FLOAT_RE = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def parse_amount(raw: AmountInput) -> float:
    """Parse a form amount into a float, degrading to ``0.0``.

    Numbers are used as-is. Strings contribute their leading numeric literal
    after surrounding whitespace is trimmed, so ``"1500 INR"`` parses as
    ``1500.0``. Empty, unparsable and NaN values become ``0.0``.
    """

    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        m = _LEADING_FLOAT_RE.match(str(raw).strip())
        if not m:
            return 0.0
        value = float(m.group(0))
    return 0.0 if math.isnan(value) else value


def department_rule(department: str | None) -> str:
    return _DEPARTMENT_CATEGORIES.get(department or "", GENERAL)


def type_amount_rule(transaction_type: str | None, amount: AmountInput) -> str:
    if transaction_type == "expense" and parse_amount(amount) > MAJOR_EXPENSE_THRESHOLD:
        return MAJOR_EXPENSE
    if transaction_type == "income":
        return REVENUE
    if transaction_type == "expense":
        return TRAVEL
    return OFFICE_SUPPLIES


def notes_rule(notes: str | None) -> str:
    text = (notes or "").lower()
    for keywords, category in _NOTE_RULES:
        if any(k in text for k in keywords):
            return category
    return GENERAL


def rule_candidates(draft: DraftTransaction) -> list[str]:
    """Return the raw per-rule candidates (may contain duplicates)."""

    return [
        department_rule(draft.department),
        type_amount_rule(draft.transaction_type, draft.amount),
        notes_rule(draft.notes),
    ]


def suggest(draft: DraftTransaction) -> list[str]:
    """Suggest exactly three distinct categories for ``draft``.

    Examples
    --------
    A large IT expense for a business trip:

    >>> suggest(DraftTransaction(department="it", transaction_type="expense",
    ...                          amount="1500", notes="business trip"))
    ['Technology', 'Major Expense', 'Travel & Expenses']
    """

    return fill_unique(rule_candidates(draft), CANONICAL_CATEGORIES, SUGGESTION_COUNT)


__all__ = [
    "MAJOR_EXPENSE_THRESHOLD",
    "SUGGESTION_COUNT",
    "department_rule",
    "notes_rule",
    "parse_amount",
    "rule_candidates",
    "suggest",
    "type_amount_rule",
]
