"""Data models and type aliases for ``category_suggest``.

Domain values (drafts, matches, stats) are frozen dataclasses so they can be
shared freely between callers. Shapes decoded from the finance API's JSON
bodies are Pydantic models; see :mod:`category_suggest.predictor` and
:mod:`category_suggest.dashboard` for the decoders built on them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Draft transaction and suggestion values
# ---------------------------------------------------------------------------

# Raw amount as entered in a form (unparsed text) or already numeric.
type AmountInput = str | float | int | None


@dataclass(frozen=True, slots=True)
class DraftTransaction:
    """An in-progress, unsaved transaction being edited by a user.

    Attributes
    ----------
    notes:
        Free-text description.
    amount:
        Numeric magnitude; may still be the unparsed text from the form.
    department:
        One of ``finance``, ``hr``, ``it``, ``marketing``, ``operations``,
        ``sales`` or empty. Compared case-sensitively.
    transaction_type:
        ``expense``/``income`` or ``Debit``/``Credit`` depending on the form.
        Treated as an opaque string.
    category:
        The field a suggestion ultimately fills in.
    """

    notes: str = ""
    amount: AmountInput = ""
    department: str = ""
    transaction_type: str = ""
    category: str = ""


@dataclass(frozen=True, slots=True)
class SuggestionMatch:
    """A candidate category returned by the external predictor."""

    category: str
    similarity_score: float
    sample_notes: str
    source_transaction_id: int


@dataclass(frozen=True, slots=True)
class SuggestionSession:
    """Caller-side suggestion state for one draft.

    ``remote_matches`` holds reconciled predictor matches; when empty the
    local heuristic supplies the options shown while ``visible`` is set.
    """

    draft: DraftTransaction = field(default_factory=DraftTransaction)
    visible: bool = False
    remote_matches: tuple[SuggestionMatch, ...] = ()


@dataclass(frozen=True, slots=True)
class DashboardStats:
    """Aggregate balances shown on the dashboard."""

    total_balance: float = 0.0
    total_income: float = 0.0
    total_expenses: float = 0.0
    transaction_count: int = 0


# ---------------------------------------------------------------------------
# Wire models (finance API JSON bodies)
# ---------------------------------------------------------------------------


class MatchPayload(BaseModel):
    """One item of the predictor's ``top_matches`` array."""

    model_config = ConfigDict(extra="ignore")

    category: str
    similarity_score: float = 0.0
    sample_notes: str = ""
    transaction_id: int

    def to_match(self) -> SuggestionMatch:
        return SuggestionMatch(
            category=self.category,
            similarity_score=self.similarity_score,
            sample_notes=self.sample_notes,
            source_transaction_id=self.transaction_id,
        )


class PredictionResponse(BaseModel):
    """Body returned by ``POST /api/v1/transactions/predict-category``."""

    model_config = ConfigDict(extra="ignore")

    predicted_category: str = ""
    confidence: float = 0.0
    top_matches: list[MatchPayload] = Field(default_factory=list)

    def matches(self) -> list[SuggestionMatch]:
        return [m.to_match() for m in self.top_matches]


class TransactionRecord(BaseModel):
    """A saved transaction as listed by ``GET /api/v1/transactions/``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    date: str
    amount: float
    category: str = ""
    notes: str = ""
    type_of_transaction: str
    created_at: datetime


type Transactions = Sequence[TransactionRecord]
"""An ordered collection of saved transactions, as returned by the API."""
