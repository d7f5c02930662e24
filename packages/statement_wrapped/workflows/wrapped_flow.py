"""End-to-end flow: statement text → parse → aggregate → snapshot.

Kept out of ``api.py`` so the public import surface stays a thin re-export
layer; ``api`` re-exports these entry points.
"""

from __future__ import annotations

import time
from os import PathLike

from ..logging_setup import get_logger
from ..models import ParseResult, StatementSnapshot
from ..parser import parse_statement, parse_statement_file
from ..stats import calculate_wrapped_stats

_logger = get_logger("statement_wrapped.workflows.wrapped_flow")


def snapshot_from_parse(result: ParseResult) -> StatementSnapshot:
    """Bundle a parse result with its statistics into one replaceable value."""

    return StatementSnapshot(
        dialect=result.dialect,
        currency=result.currency,
        currency_locale=result.currency_locale,
        transactions=result.transactions,
        stats=calculate_wrapped_stats(result.transactions),
    )


def load_statement_text(csv_text: str) -> StatementSnapshot:
    """Parse and aggregate statement text.

    Parser errors (:class:`~statement_wrapped.errors.StatementParseError`)
    propagate unchanged; on error no snapshot is produced.
    """

    t0 = time.perf_counter()
    snapshot = snapshot_from_parse(parse_statement(csv_text))
    _logger.info(
        "Loaded %s statement: %d transactions in %.3fs",
        snapshot.dialect.value,
        len(snapshot.transactions),
        time.perf_counter() - t0,
    )
    return snapshot


def load_statement(csv_path: str | PathLike[str]) -> StatementSnapshot:
    """Read a statement export from disk, then parse and aggregate it."""

    t0 = time.perf_counter()
    snapshot = snapshot_from_parse(parse_statement_file(csv_path))
    _logger.info(
        "Loaded %s statement from %s: %d transactions in %.3fs",
        snapshot.dialect.value,
        csv_path,
        len(snapshot.transactions),
        time.perf_counter() - t0,
    )
    return snapshot


__all__ = ["load_statement", "load_statement_text", "snapshot_from_parse"]
