"""Test helpers standing in for the remote category predictor.

``PredictorStub`` is a callable with the ``Predictor`` shape: it receives the
request body mapping and returns a decoded JSON body. Tests provide either a
fixed list of ``top_matches`` or an exception to raise, and can inspect the
captured request bodies afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def make_match(
    category: str,
    transaction_id: int,
    *,
    score: float = 0.9,
    notes: str = "",
) -> dict[str, Any]:
    """Return one ``top_matches`` item in the predictor's wire format."""

    return {
        "category": category,
        "similarity_score": score,
        "sample_notes": notes,
        "transaction_id": transaction_id,
    }


def make_response(
    matches: Sequence[Mapping[str, Any]], *, predicted: str | None = None
) -> dict[str, Any]:
    predicted_category = predicted if predicted is not None else (
        matches[0]["category"] if matches else ""
    )
    return {
        "predicted_category": predicted_category,
        "confidence": 0.87,
        "top_matches": list(matches),
    }


class PredictorStub:
    """Minimal predictor transport for tests.

    Parameters
    ----------
    body:
        The decoded JSON body to return from each call.
    error:
        When set, raised from each call instead of returning ``body``.
    """

    def __init__(self, body: Any = None, *, error: BaseException | None = None) -> None:
        self._body = body
        self._error = error
        self.calls: list[dict[str, Any]] = []

    def __call__(self, payload: Mapping[str, Any]) -> Any:
        self.calls.append(dict(payload))
        if self._error is not None:
            raise self._error
        return self._body
