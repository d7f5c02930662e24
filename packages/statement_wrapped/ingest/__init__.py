"""Statement ingest: CSV reading, dialect detection, and per-dialect adapters."""

from .dialects import detect_dialect
from .utils import read_statement_rows

__all__ = ["detect_dialect", "read_statement_rows"]
