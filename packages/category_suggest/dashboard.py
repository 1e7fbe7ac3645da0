"""Dashboard aggregates over saved transactions.

Credits (``type_of_transaction`` equal to ``credit``, any case) count as
income; every other type counts as an expense. Amounts are stored as
positive magnitudes, so the sign is derived from the type.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .models import DashboardStats, TransactionRecord, Transactions

DEFAULT_RECENT_LIMIT = 3

_TRANSACTIONS_ADAPTER: TypeAdapter[list[TransactionRecord]] = TypeAdapter(list[TransactionRecord])


def parse_transactions(body: Any) -> list[TransactionRecord]:
    """Validate the JSON array returned by the transactions listing.

    Raises ``ValueError`` for a non-list body or any invalid item.
    """

    if not isinstance(body, list):
        raise ValueError("Invalid transactions response: expected a JSON array at top level")
    try:
        return _TRANSACTIONS_ADAPTER.validate_python(body)
    except ValidationError as e:
        raise ValueError(f"Invalid transactions response: {e}") from e


def is_credit(tx: TransactionRecord) -> bool:
    return tx.type_of_transaction.lower() == "credit"


def signed_amount(tx: TransactionRecord) -> float:
    """Amount as displayed in the history table: credits positive, others negative."""

    return tx.amount if is_credit(tx) else -tx.amount


def compute_stats(transactions: Iterable[TransactionRecord]) -> DashboardStats:
    income = 0.0
    expenses = 0.0
    count = 0
    for tx in transactions:
        count += 1
        if is_credit(tx):
            income += tx.amount
        else:
            expenses += tx.amount
    return DashboardStats(
        total_balance=income - expenses,
        total_income=income,
        total_expenses=expenses,
        transaction_count=count,
    )


def _created_key(tx: TransactionRecord) -> datetime:
    # Naive timestamps from the API are UTC.
    ts = tx.created_at
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=UTC)


def recent_transactions(
    transactions: Transactions, limit: int = DEFAULT_RECENT_LIMIT
) -> list[TransactionRecord]:
    """Return the ``limit`` newest transactions by ``created_at``.

    Ties keep their input order.
    """

    if limit <= 0:
        return []
    return sorted(transactions, key=_created_key, reverse=True)[:limit]


__all__ = [
    "DEFAULT_RECENT_LIMIT",
    "compute_stats",
    "is_credit",
    "parse_transactions",
    "recent_transactions",
    "signed_amount",
]
