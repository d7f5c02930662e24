"""Fatal parse conditions raised at the statement parser boundary.

Both errors subclass :class:`ValueError` so callers that already treat bad
input as a ``ValueError`` keep working. Messages are short and stable; turning
them into user-facing copy is the caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import StatementDialect


class StatementParseError(ValueError):
    """Base class for errors that reject a statement as a whole."""


class FormatNotRecognizedError(StatementParseError):
    """The header row matches neither supported statement dialect."""

    def __init__(self, headers: Sequence[str]) -> None:
        self.headers: tuple[str, ...] = tuple(headers)
        super().__init__(
            "format not recognized: expected an AmEx UK or AmEx Mexico statement export "
            f"(headers: {', '.join(self.headers) or '<none>'})"
        )


class EmptyStatementError(StatementParseError):
    """The dialect was recognized but no row survived parsing."""

    def __init__(self, dialect: StatementDialect) -> None:
        self.dialect = dialect
        super().__init__(f"no valid transactions found in {dialect.value} statement")


__all__ = ["StatementParseError", "FormatNotRecognizedError", "EmptyStatementError"]
