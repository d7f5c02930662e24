"""Adapter for American Express UK CSV exports (dialect ``"uk"``).

CSV header (as exported; matched case-insensitively):
Date, Description, Amount, Extended Details, Appears On Your Statement As,
Address, Town/City, Postcode, Country, Reference, Category

Dates are ``DD/MM/YYYY``; amounts are positive for charges and negative for
credits; ``Category`` holds an issuer label such as
``"Entertainment-Restaurants"``; ``Extended Details`` may carry foreign-spend
metadata (see :func:`~statement_wrapped.currency.parse_foreign_currency`).
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Iterator, Mapping

from ...currency import parse_foreign_currency
from ...logging_setup import get_logger
from ...models import EnrichedTransaction, RawRecord
from ..enrichment import enrich
from ..utils import cell, parse_amount

_logger = get_logger("statement_wrapped.ingest.amex_uk")


def parse_uk_date(value: str | None) -> dt.date | None:
    """Parse ``DD/MM/YYYY``; return ``None`` for anything else."""

    if value is None:
        return None
    parts = [p.strip() for p in value.strip().split("/")]
    if len(parts) != 3 or not all(p.isdecimal() for p in parts):
        return None
    day, month, year = (int(p) for p in parts)
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def to_raw_record(row: Mapping[str, str]) -> RawRecord:
    return RawRecord(
        date=cell(row, "Date").strip(),
        description=cell(row, "Description").strip(),
        amount=parse_amount(cell(row, "Amount")),
        extended_details=cell(row, "Extended Details"),
        appears_on_statement=cell(row, "Appears On Your Statement As").strip(),
        address=cell(row, "Address"),
        town_city=cell(row, "Town/City"),
        postcode=cell(row, "Postcode").strip(),
        country=cell(row, "Country").strip(),
        reference=cell(row, "Reference").strip(),
        category=cell(row, "Category").strip() or "Other",
    )


def to_transactions(rows: Iterable[Mapping[str, str]]) -> Iterator[EnrichedTransaction]:
    """Convert AmEx UK rows to enriched transactions, in input order.

    Rows whose date is missing or unparseable are skipped.
    """

    for idx, row in enumerate(rows):
        raw = to_raw_record(row)
        parsed = parse_uk_date(raw.date) if raw.date else None
        if parsed is None:
            _logger.debug("Skipping row %d: unparseable date %r", idx, raw.date)
            continue
        yield enrich(
            raw,
            idx,
            parsed,
            foreign_currency=parse_foreign_currency(raw.extended_details),
        )


__all__ = ["parse_uk_date", "to_raw_record", "to_transactions"]
