"""Public interface for the ``category_suggest`` package.

Re-exports the suggestion, reconciliation, session and dashboard helpers and
the public models as the stable import surface. There is no runtime logic
here, only symbol re-exports.
"""

from .categories import CANONICAL_CATEGORIES, DEPARTMENTS, fill_unique
from .dashboard import (
    compute_stats,
    parse_transactions,
    recent_transactions,
    signed_amount,
)
from .heuristics import parse_amount, suggest
from .models import (
    DashboardStats,
    DraftTransaction,
    PredictionResponse,
    SuggestionMatch,
    SuggestionSession,
    TransactionRecord,
)
from .predictor import (
    build_prediction_request,
    fetch_remote_suggestions,
    parse_prediction_response,
    suggest_categories,
)
from .reconcile import MAX_REMOTE_SUGGESTIONS, reconcile
from .session import (
    new_session,
    open_with_fallback,
    open_with_matches,
    reset_session,
    select_suggestion,
    session_options,
    update_draft,
)

__all__ = [
    # Suggestions
    "suggest",
    "parse_amount",
    "reconcile",
    "fill_unique",
    "suggest_categories",
    "build_prediction_request",
    "parse_prediction_response",
    "fetch_remote_suggestions",
    # Session
    "new_session",
    "update_draft",
    "open_with_matches",
    "open_with_fallback",
    "session_options",
    "select_suggestion",
    "reset_session",
    # Dashboard
    "parse_transactions",
    "compute_stats",
    "recent_transactions",
    "signed_amount",
    # Models / constants
    "DraftTransaction",
    "SuggestionMatch",
    "SuggestionSession",
    "PredictionResponse",
    "TransactionRecord",
    "DashboardStats",
    "CANONICAL_CATEGORIES",
    "DEPARTMENTS",
    "MAX_REMOTE_SUGGESTIONS",
]
