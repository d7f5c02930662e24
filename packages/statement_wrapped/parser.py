"""Statement parser: raw CSV text → :class:`~statement_wrapped.models.ParseResult`.

The dialect is decided once from the header row; every row is then projected
into a typed record by that dialect's adapter. Rows with unreadable dates are
dropped without aborting the parse. The whole input is rejected (no partial
result) when the dialect is unknown or nothing survives.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .errors import EmptyStatementError
from .ingest.adapters import amex_mexico_csv, amex_uk_csv
from .ingest.dialects import detect_dialect
from .ingest.utils import read_statement_rows
from .logging_setup import get_logger
from .models import DIALECT_PROFILES, ParseResult, StatementDialect

_logger = get_logger("statement_wrapped.parser")

_ADAPTERS = {
    StatementDialect.AMEX_UK: amex_uk_csv.to_transactions,
    StatementDialect.AMEX_MEXICO: amex_mexico_csv.to_transactions,
}


def parse_statement(csv_text: str) -> ParseResult:
    """Parse a statement export and return its enriched transactions.

    Raises
    ------
    FormatNotRecognizedError
        The header row matches neither the AmEx UK nor the AmEx Mexico export.
    EmptyStatementError
        The dialect was recognized but no row had a parseable date.
    """

    headers, rows = read_statement_rows(csv_text)
    dialect = detect_dialect(headers)
    profile = DIALECT_PROFILES[dialect]

    transactions = tuple(_ADAPTERS[dialect](rows))
    dropped = len(rows) - len(transactions)
    if dropped:
        _logger.debug("Dropped %d of %d rows with unparseable dates", dropped, len(rows))
    if not transactions:
        raise EmptyStatementError(dialect)

    return ParseResult(
        dialect=dialect,
        currency=profile.currency,
        currency_locale=profile.currency_locale,
        transactions=transactions,
    )


def parse_statement_file(path: str | PathLike[str]) -> ParseResult:
    """Read ``path`` as UTF-8 (BOM tolerated) and parse it."""

    with Path(path).open(encoding="utf-8-sig", newline="") as f:
        return parse_statement(f.read())


__all__ = ["parse_statement", "parse_statement_file"]
