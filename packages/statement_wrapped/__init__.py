"""Public interface for the ``statement_wrapped`` package.

Exposes the parser, the aggregation engine and the public models/types as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .api import (
    aggregate,
    calculate_category_totals,
    calculate_daily_balance,
    calculate_foreign_spend,
    calculate_merchant_totals,
    calculate_monthly_spending,
    calculate_wrapped_stats,
    load_statement,
    load_statement_text,
    parse_statement,
    parse_statement_file,
    peak_month,
    search_transactions,
)
from .currency import format_compact_number, format_currency
from .errors import EmptyStatementError, FormatNotRecognizedError, StatementParseError
from .models import (
    CategoryTotal,
    CurrencySpend,
    DailyBalance,
    DateRange,
    EnrichedTransaction,
    ForeignCurrencyDetail,
    ForeignSpendSummary,
    MerchantTotal,
    MonthlySpending,
    ParseResult,
    RawRecord,
    StatementDialect,
    StatementSnapshot,
    TransactionKind,
    WrappedStatistics,
)

__all__ = [
    # API
    "parse_statement",
    "parse_statement_file",
    "aggregate",
    "calculate_wrapped_stats",
    "calculate_category_totals",
    "calculate_merchant_totals",
    "calculate_monthly_spending",
    "calculate_foreign_spend",
    "calculate_daily_balance",
    "peak_month",
    "search_transactions",
    "load_statement",
    "load_statement_text",
    "format_currency",
    "format_compact_number",
    # Errors
    "StatementParseError",
    "FormatNotRecognizedError",
    "EmptyStatementError",
    # Models / types
    "StatementDialect",
    "TransactionKind",
    "RawRecord",
    "ForeignCurrencyDetail",
    "EnrichedTransaction",
    "ParseResult",
    "CategoryTotal",
    "MerchantTotal",
    "MonthlySpending",
    "CurrencySpend",
    "ForeignSpendSummary",
    "DateRange",
    "WrappedStatistics",
    "DailyBalance",
    "StatementSnapshot",
]
