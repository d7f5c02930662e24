"""Statement dialect detection from the CSV header row."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import FormatNotRecognizedError
from ..models import StatementDialect
from .utils import normalize_header

# Header sets compared after trimming and lower-casing.
DIALECT_HEADERS: tuple[tuple[StatementDialect, frozenset[str]], ...] = (
    (StatementDialect.AMEX_UK, frozenset({"date", "category"})),
    (StatementDialect.AMEX_MEXICO, frozenset({"fecha", "importe"})),
)


def detect_dialect(headers: Iterable[str]) -> StatementDialect:
    """Return the dialect whose required headers are all present.

    Raises :class:`~statement_wrapped.errors.FormatNotRecognizedError` when no
    dialect matches.
    """

    original = [h for h in headers if h is not None]
    present = {normalize_header(h) for h in original}
    for dialect, required in DIALECT_HEADERS:
        if required <= present:
            return dialect
    raise FormatNotRecognizedError(original)


__all__ = ["DIALECT_HEADERS", "detect_dialect"]
