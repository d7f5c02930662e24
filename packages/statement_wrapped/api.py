"""Public API surface for the ``statement_wrapped`` package.

This module is a stable import surface only: the parser lives in
``statement_wrapped.parser``, the aggregation engine in
``statement_wrapped.stats`` and the end-to-end flow in
``statement_wrapped.workflows.wrapped_flow``.
"""

from __future__ import annotations

from .parser import parse_statement, parse_statement_file
from .stats import (
    aggregate,
    calculate_category_totals,
    calculate_daily_balance,
    calculate_foreign_spend,
    calculate_merchant_totals,
    calculate_monthly_spending,
    calculate_wrapped_stats,
    peak_month,
    search_transactions,
)
from .workflows.wrapped_flow import load_statement, load_statement_text, snapshot_from_parse

__all__ = [
    "aggregate",
    "calculate_category_totals",
    "calculate_daily_balance",
    "calculate_foreign_spend",
    "calculate_merchant_totals",
    "calculate_monthly_spending",
    "calculate_wrapped_stats",
    "load_statement",
    "load_statement_text",
    "parse_statement",
    "parse_statement_file",
    "peak_month",
    "search_transactions",
    "snapshot_from_parse",
]
