"""Request/response codec for the remote category predictor, with fallback.

The HTTP call itself belongs to the host application. Callers inject a
``predict`` callable that receives the request body mapping and returns the
decoded JSON response; this module builds the body, validates the response
with Pydantic, and reconciles ``top_matches``.

Any failure on the remote path (transport error raised by ``predict``, a body
that does not match the schema) is logged and turned into an empty match
list. An empty list tells the caller to render the local heuristic instead.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from .heuristics import parse_amount, suggest
from .logging_setup import get_logger
from .models import DraftTransaction, PredictionResponse, SuggestionMatch
from .reconcile import MAX_REMOTE_SUGGESTIONS, categories_of, reconcile

type Predictor = Callable[[Mapping[str, Any]], Mapping[str, Any]]
"""Transport supplied by the caller: request body in, decoded JSON body out."""

_logger = get_logger("category_suggest.predictor")


def build_prediction_request(draft: DraftTransaction) -> dict[str, Any]:
    """Return the JSON body for the predict-category endpoint.

    ``amount`` is sent as a number; unparsable amounts are sent as ``0``.
    """

    return {
        "notes": draft.notes or "",
        "type_of_transaction": draft.transaction_type,
        "amount": parse_amount(draft.amount),
    }


def parse_prediction_response(body: Any) -> PredictionResponse:
    """Validate a decoded predictor response.

    Raises
    ------
    ValueError
        When ``body`` is not a JSON object or does not match the response
        schema (e.g. a match without ``category`` or ``transaction_id``).
    """

    if not isinstance(body, Mapping):
        raise ValueError("Invalid prediction response: expected a JSON object at top level")
    try:
        return PredictionResponse.model_validate(body)
    except ValidationError as e:
        raise ValueError(
            f"Invalid prediction response: {e.error_count()} validation error(s)"
        ) from e


def fetch_remote_suggestions(
    draft: DraftTransaction,
    predict: Predictor,
    *,
    limit: int = MAX_REMOTE_SUGGESTIONS,
) -> list[SuggestionMatch]:
    """Call the predictor for ``draft`` and return reconciled matches.

    Never raises for predictor or decoding failures; those are logged at
    WARNING and yield ``[]``.
    """

    payload = build_prediction_request(draft)
    t0 = time.perf_counter()
    try:
        response = parse_prediction_response(predict(payload))
    except Exception as e:  # noqa: BLE001 - remote failures fall back to local suggestions
        _logger.warning(
            "predict_category:failed latency_ms=%.2f error=%s detail=%s",
            (time.perf_counter() - t0) * 1000.0,
            e.__class__.__name__,
            e,
        )
        return []

    matches = response.matches()
    reconciled = reconcile(matches, limit=limit)
    _logger.info(
        "predict_category:done latency_ms=%.2f top_matches=%d suggestions=%d predicted=%s",
        (time.perf_counter() - t0) * 1000.0,
        len(matches),
        len(reconciled),
        response.predicted_category or "-",
    )
    return reconciled


def suggest_categories(
    draft: DraftTransaction,
    predict: Predictor | None = None,
    *,
    limit: int = MAX_REMOTE_SUGGESTIONS,
) -> list[str]:
    """Return the category labels to offer for ``draft``.

    Remote categories are used when the predictor yields any; otherwise (no
    predictor, failure, or no matches) the three local suggestions.
    """

    if predict is not None:
        remote = fetch_remote_suggestions(draft, predict, limit=limit)
        if remote:
            return categories_of(remote)
        _logger.debug("predict_category:fallback_local")
    return suggest(draft)


__all__ = [
    "Predictor",
    "build_prediction_request",
    "fetch_remote_suggestions",
    "parse_prediction_response",
    "suggest_categories",
]
