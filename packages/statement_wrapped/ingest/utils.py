"""CSV helpers shared by the statement adapters.

Parsing follows RFC 4180 rules via the stdlib :mod:`csv` module (quoted fields
with embedded commas and newlines, doubled quotes). Rows are projected into
plain ``dict[str, str]`` keyed by the lower-cased, trimmed header name so the
adapters never deal with ``None`` keys/values or header casing.
"""

from __future__ import annotations

import csv
import math
from collections.abc import Mapping
from io import StringIO

_BOM = "\ufeff"


def normalize_header(name: str) -> str:
    return name.strip().lower()


def read_statement_rows(csv_text: str) -> tuple[list[str], list[dict[str, str]]]:
    """Return ``(headers, rows)`` for ``csv_text``.

    ``headers`` are trimmed but keep their original casing (useful for error
    messages). Each row maps the normalized header to its cell text; missing
    cells become ``""``. Only truly empty lines are skipped; a row of blank
    cells (``,,,,``) is kept so it still takes a row index.
    """

    if csv_text.startswith(_BOM):
        csv_text = csv_text[len(_BOM) :]

    with StringIO(csv_text, newline="") as f:
        reader = csv.DictReader(f)
        headers = [h.strip() for h in (reader.fieldnames or []) if h is not None]
        rows: list[dict[str, str]] = []
        for row in reader:
            # DictReader may include a None key aggregating extra columns.
            normalized = {
                normalize_header(k): (v if isinstance(v, str) else "")
                for k, v in row.items()
                if k is not None
            }
            rows.append(normalized)
    return headers, rows


def cell(row: Mapping[str, str], *names: str) -> str:
    """Return the first non-blank cell among ``names`` (case-insensitive), else ``""``."""

    for name in names:
        value = row.get(normalize_header(name))
        if value is not None and value.strip():
            return value
    return ""


def parse_amount(raw: str | None) -> float:
    """Parse a signed statement amount; anything unreadable becomes ``0.0``."""

    if raw is None:
        return 0.0
    s = raw.strip().replace(",", "")
    if not s:
        return 0.0
    try:
        value = float(s)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


__all__ = ["cell", "normalize_header", "parse_amount", "read_statement_rows"]
