"""Adapter for American Express Mexico CSV exports (dialect ``"mexico"``).

CSV header (Spanish; matched case-insensitively):
Fecha (or Fecha de Compra), Descripción, Importe[, Referencia]

Dates read ``DD Mon YYYY`` (``"29 Dec 2025"``). There is no category column
and no extended details, so categories are inferred from the description via
:func:`~statement_wrapped.categories.infer_category_label` and no foreign-spend
detail is ever produced.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Iterator, Mapping

from ...categories import infer_category_label
from ...logging_setup import get_logger
from ...models import EnrichedTransaction, RawRecord
from ..enrichment import enrich
from ..utils import cell, parse_amount

_logger = get_logger("statement_wrapped.ingest.amex_mexico")

MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
    # Spanish abbreviations that differ from the English ones
    "ene": 1,
    "abr": 4,
    "ago": 8,
    "dic": 12,
}


def parse_mexico_date(value: str | None) -> dt.date | None:
    """Parse ``DD Mon YYYY``; return ``None`` for anything else."""

    if value is None:
        return None
    parts = value.split()
    if len(parts) != 3:
        return None
    day_s, month_s, year_s = parts
    month = MONTHS.get(month_s.lower().rstrip("."))
    if month is None or not day_s.isdecimal() or not year_s.isdecimal():
        return None
    try:
        return dt.date(int(year_s), month, int(day_s))
    except ValueError:
        return None


def to_raw_record(row: Mapping[str, str]) -> RawRecord:
    description = cell(row, "Descripción", "Descripcion").strip()
    return RawRecord(
        date=cell(row, "Fecha", "Fecha de Compra").strip(),
        description=description,
        amount=parse_amount(cell(row, "Importe")),
        appears_on_statement=description,
        country="Mexico",
        reference=cell(row, "Referencia").strip(),
        category=infer_category_label(description),
    )


def to_transactions(rows: Iterable[Mapping[str, str]]) -> Iterator[EnrichedTransaction]:
    """Convert AmEx Mexico rows to enriched transactions, in input order.

    Rows whose date is missing or unparseable are skipped.
    """

    for idx, row in enumerate(rows):
        raw = to_raw_record(row)
        parsed = parse_mexico_date(raw.date) if raw.date else None
        if parsed is None:
            _logger.debug("Skipping row %d: unparseable date %r", idx, raw.date)
            continue
        yield enrich(raw, idx, parsed)


__all__ = ["MONTHS", "parse_mexico_date", "to_raw_record", "to_transactions"]
