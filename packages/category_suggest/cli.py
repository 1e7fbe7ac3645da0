# ruff: noqa: I001
"""CLI for the ``category_suggest`` package.

Command handlers (``cmd_*``) are plain functions returning a process exit
code so they are easy to call from scripts and tests; the Typer app below
only parses options and delegates. Settings come from the environment, with
a local ``.env`` loaded first via ``python-dotenv``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .config import load_settings
from .logging_setup import configure_logging, get_logger

_logger = get_logger("category_suggest.cli")


def _read_json(path: str) -> Any:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def cmd_suggest(*, department: str, transaction_type: str, amount: str, notes: str) -> int:
    """Print the three local suggestions for a draft, one per line."""

    from .heuristics import suggest
    from .models import DraftTransaction

    draft = DraftTransaction(
        notes=notes,
        amount=amount,
        department=department,
        transaction_type=transaction_type,
    )
    for category in suggest(draft):
        print(category)
    return 0


def cmd_reconcile(response_path: str, *, limit: int | None = None) -> int:
    """Reconcile a saved predictor response and print one line per suggestion.

    Output format is ``"<category>\\t<similarity_score>\\t<transaction_id>"``.
    Errors are written to stderr and yield exit status 1.
    """

    from .predictor import parse_prediction_response
    from .reconcile import reconcile

    if limit is None:
        limit = load_settings().max_matches

    try:
        body = _read_json(response_path)
    except FileNotFoundError:
        print(f"Error: file not found: {response_path}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: {response_path} is not valid JSON: {e}", file=sys.stderr)
        return 1

    try:
        response = parse_prediction_response(body)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    suggestions = reconcile(response.matches(), limit=limit)
    _logger.debug(
        "cli:reconcile top_matches=%d suggestions=%d", len(response.top_matches), len(suggestions)
    )
    for m in suggestions:
        print(f"{m.category}\t{m.similarity_score}\t{m.source_transaction_id}")
    return 0


def cmd_summary(transactions_path: str, *, recent: int | None = None) -> int:
    """Print dashboard totals followed by the most recent transactions."""

    from .dashboard import compute_stats, parse_transactions, recent_transactions, signed_amount

    if recent is None:
        recent = load_settings().recent_limit

    try:
        body = _read_json(transactions_path)
        transactions = parse_transactions(body)
    except FileNotFoundError:
        print(f"Error: file not found: {transactions_path}", file=sys.stderr)
        return 1
    except ValueError as e:
        # JSONDecodeError is a ValueError subclass.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stats = compute_stats(transactions)
    print(f"balance\t{stats.total_balance:.2f}")
    print(f"income\t{stats.total_income:.2f}")
    print(f"expenses\t{stats.total_expenses:.2f}")
    print(f"count\t{stats.transaction_count}")
    for tx in recent_transactions(transactions, recent):
        print(f"{tx.id}\t{tx.created_at.isoformat()}\t{tx.category}\t{signed_amount(tx):.2f}")
    return 0


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Category suggestions and dashboard summaries for finance-tracker drafts.",
)


def _exit(code: int) -> None:
    if code:
        raise typer.Exit(code)


@app.command("suggest")
def suggest_cmd(
    *,
    department: str = typer.Option("", help="Department code (finance, hr, it, ...)."),
    transaction_type: str = typer.Option(
        "", "--type", help="Transaction type (expense, income, Debit, Credit)."
    ),
    amount: str = typer.Option("", help="Amount as typed; unparsable values count as 0."),
    notes: str = typer.Option("", help="Free-text notes."),
) -> None:
    """Suggest three categories for a draft transaction."""

    _exit(
        cmd_suggest(
            department=department,
            transaction_type=transaction_type,
            amount=amount,
            notes=notes,
        )
    )


# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
RESPONSE_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--response-path",
    help="Path to a saved predict-category JSON response",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)

TRANSACTIONS_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--transactions-path",
    help="Path to a saved transactions listing (JSON array)",
    dir_okay=False,
    file_okay=True,
    exists=False,
)


@app.command("reconcile")
def reconcile_cmd(
    response_path: Annotated[Path, RESPONSE_PATH_OPTION],
    *,
    limit: int | None = typer.Option(
        None, min=1, help="Maximum suggestions (falls back to CATEGORY_SUGGEST_MAX_MATCHES)."
    ),
) -> None:
    """Collapse predictor matches to unique categories."""

    _exit(cmd_reconcile(str(response_path), limit=limit))


@app.command("summary")
def summary_cmd(
    transactions_path: Annotated[Path, TRANSACTIONS_PATH_OPTION],
    *,
    recent: int | None = typer.Option(
        None,
        min=0,
        help="Recent transactions to list (falls back to CATEGORY_SUGGEST_RECENT_LIMIT).",
    ),
) -> None:
    """Print balance, income, expenses and recent transactions."""

    _exit(cmd_summary(str(transactions_path), recent=recent))


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    main()
