import logging

import pytest

from category_suggest import (
    DraftTransaction,
    build_prediction_request,
    fetch_remote_suggestions,
    parse_prediction_response,
    reconcile,
    suggest_categories,
)
from tests.helpers.predictor_stub import PredictorStub, make_match, make_response


def _draft() -> DraftTransaction:
    return DraftTransaction(
        notes="Flight to Delhi",
        amount="2400.50",
        department="sales",
        transaction_type="expense",
    )


def test_build_prediction_request_shape():
    body = build_prediction_request(_draft())
    assert body == {"notes": "Flight to Delhi", "type_of_transaction": "expense", "amount": 2400.5}


def test_build_prediction_request_unparsable_amount_is_zero():
    body = build_prediction_request(DraftTransaction(amount="n/a", transaction_type="Debit"))
    assert body == {"notes": "", "type_of_transaction": "Debit", "amount": 0.0}


def test_parse_prediction_response_maps_wire_fields():
    resp = parse_prediction_response(
        make_response([make_match("Travel", 17, score=0.93, notes="cab to airport")])
    )
    assert resp.predicted_category == "Travel"
    [m] = resp.matches()
    assert m.category == "Travel"
    assert m.similarity_score == pytest.approx(0.93)
    assert m.sample_notes == "cab to airport"
    assert m.source_transaction_id == 17


def test_parse_prediction_response_missing_top_matches_is_empty():
    resp = parse_prediction_response({"predicted_category": "General", "confidence": 0.1})
    assert resp.matches() == []


def test_parse_prediction_response_keeps_category_whitespace():
    resp = parse_prediction_response(
        make_response([make_match("Food", 1, notes=" snacks "), make_match(" Food", 2)])
    )
    out = reconcile(resp.matches())
    assert [m.source_transaction_id for m in out] == [1, 2]
    assert [m.category for m in out] == ["Food", " Food"]
    assert out[0].sample_notes == " snacks "


def test_parse_prediction_response_missing_score_defaults_to_zero():
    body = {"top_matches": [{"category": "Food", "transaction_id": 4}]}
    [m] = parse_prediction_response(body).matches()
    assert m.similarity_score == 0.0
    out = fetch_remote_suggestions(_draft(), PredictorStub(body))
    assert [(m.category, m.source_transaction_id) for m in out] == [("Food", 4)]


@pytest.mark.parametrize(
    "body",
    [
        [],
        "oops",
        None,
        {"top_matches": "not-a-list"},
        {"top_matches": [{"similarity_score": 0.4, "transaction_id": 1}]},
        {"top_matches": [{"category": "Food", "similarity_score": 0.4}]},
    ],
)
def test_parse_prediction_response_rejects_invalid_bodies(body):
    with pytest.raises(ValueError):
        parse_prediction_response(body)


def test_fetch_remote_suggestions_reconciles_top_matches():
    stub = PredictorStub(
        make_response(
            [
                make_match("Food", 1),
                make_match("Food", 2),
                make_match("Travel", 3),
            ]
        )
    )
    out = fetch_remote_suggestions(_draft(), stub)
    assert [m.source_transaction_id for m in out] == [1, 3]
    assert stub.calls == [build_prediction_request(_draft())]


def test_fetch_remote_suggestions_transport_failure_returns_empty(caplog):
    stub = PredictorStub(error=ConnectionError("connection refused"))
    with caplog.at_level(logging.WARNING, logger="category_suggest"):
        assert fetch_remote_suggestions(_draft(), stub) == []
    assert any("predict_category:failed" in r.getMessage() for r in caplog.records)


def test_fetch_remote_suggestions_malformed_body_returns_empty():
    stub = PredictorStub({"top_matches": [{"category": "Food"}]})
    assert fetch_remote_suggestions(_draft(), stub) == []


def test_suggest_categories_prefers_remote():
    stub = PredictorStub(
        make_response([make_match(c, i) for i, c in enumerate("ABACDEFG")])
    )
    assert suggest_categories(_draft(), stub) == ["A", "B", "C", "D", "E"]


def test_suggest_categories_falls_back_to_local_on_failure():
    stub = PredictorStub(error=TimeoutError("timed out"))
    # sales -> General; expense > 1000 -> Major Expense; "Flight" has no keyword -> General
    assert suggest_categories(_draft(), stub) == ["General", "Major Expense", "Technology"]


def test_suggest_categories_falls_back_to_local_on_no_matches():
    stub = PredictorStub(make_response([]))
    assert suggest_categories(_draft(), stub) == ["General", "Major Expense", "Technology"]


def test_suggest_categories_without_predictor_is_local_only():
    assert suggest_categories(_draft()) == ["General", "Major Expense", "Technology"]
