"""Data models for ``statement_wrapped``.

Two layers live here:

- The parsed record layer (``RawRecord``, ``EnrichedTransaction`` and friends)
  as frozen, slotted dataclasses with explicit field order, built once per CSV
  row and never mutated.
- The aggregate layer (``WrappedStatistics`` and its parts) as frozen pydantic
  models so the snapshot can be compared, hashed into caches by callers, and
  dumped to JSON with ``model_dump(mode="json")``.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Dialects
# ---------------------------------------------------------------------------


class StatementDialect(StrEnum):
    """Statement export formats recognized by the parser."""

    AMEX_UK = "uk"
    AMEX_MEXICO = "mexico"


@dataclass(frozen=True, slots=True)
class DialectProfile:
    """Fixed per-dialect settings: home currency and display locale."""

    dialect: StatementDialect
    currency: str
    currency_locale: str


DIALECT_PROFILES: dict[StatementDialect, DialectProfile] = {
    StatementDialect.AMEX_UK: DialectProfile(StatementDialect.AMEX_UK, "GBP", "en-GB"),
    StatementDialect.AMEX_MEXICO: DialectProfile(StatementDialect.AMEX_MEXICO, "MXN", "es-MX"),
}


# ---------------------------------------------------------------------------
# Parsed records
# ---------------------------------------------------------------------------


class TransactionKind(StrEnum):
    """Mutually exclusive classification of a statement line."""

    PURCHASE = "purchase"
    REFUND = "refund"
    PAYMENT = "payment"


@dataclass(frozen=True, slots=True)
class RawRecord:
    """One statement row, field for field, before interpretation.

    ``date`` keeps the dialect-specific text (``DD/MM/YYYY`` or
    ``DD Mon YYYY``); ``amount`` is already a signed float (positive = charge).
    """

    date: str
    description: str
    amount: float
    extended_details: str = ""
    appears_on_statement: str = ""
    address: str = ""
    town_city: str = ""
    postcode: str = ""
    country: str = ""
    reference: str = ""
    category: str = ""


@dataclass(frozen=True, slots=True)
class ForeignCurrencyDetail:
    """Settlement details for a transaction made in a non-home currency."""

    foreign_amount: float
    currency: str
    currency_code: str
    commission: float
    exchange_rate: float


@dataclass(frozen=True, slots=True)
class EnrichedTransaction:
    """The normalized, application-wide unit of data.

    Carries every ``RawRecord`` field plus the derived ones. ``absolute_amount``
    always equals ``abs(amount)`` and ``main_category``/``sub_category`` are
    never ``None`` (``"Other"``/``""`` when the statement gives nothing).
    """

    id: str
    date: str
    description: str
    amount: float
    parsed_date: dt.date
    absolute_amount: float
    kind: TransactionKind
    main_category: str
    sub_category: str
    merchant_name: str
    foreign_currency: ForeignCurrencyDetail | None = None
    extended_details: str = ""
    appears_on_statement: str = ""
    address: str = ""
    town_city: str = ""
    postcode: str = ""
    country: str = ""
    reference: str = ""
    category: str = ""

    @property
    def is_purchase(self) -> bool:
        return self.kind is TransactionKind.PURCHASE

    @property
    def is_refund(self) -> bool:
        return self.kind is TransactionKind.REFUND

    @property
    def is_payment(self) -> bool:
        return self.kind is TransactionKind.PAYMENT

    @property
    def month_key(self) -> str:
        """Calendar month as ``YYYY-MM``."""
        return f"{self.parsed_date.year:04d}-{self.parsed_date.month:02d}"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Atomic parser output: dialect, its home currency/locale, and rows."""

    dialect: StatementDialect
    currency: str
    currency_locale: str
    transactions: tuple[EnrichedTransaction, ...]


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CategoryTotal(_Frozen):
    category: str
    total: float
    count: int
    percentage: float


class MerchantTotal(_Frozen):
    merchant_name: str
    total: float
    # Purchases only; refunds never count as a visit.
    count: int
    average_transaction: float


class MonthlySpending(_Frozen):
    month: str
    month_label: str
    total: float
    count: int


class CurrencySpend(_Frozen):
    currency_code: str
    currency: str
    total_foreign: float
    total_home: float
    transaction_count: int


class ForeignSpendSummary(_Frozen):
    total_home: float = 0.0
    total_commission: float = 0.0
    transaction_count: int = 0
    by_currency: tuple[CurrencySpend, ...] = ()


class DateRange(_Frozen):
    start: dt.date | None = None
    end: dt.date | None = None


class WrappedStatistics(_Frozen):
    """Immutable summary snapshot derived from one list of transactions.

    Every currency field is rounded to 2 decimals and every percentage to 1
    decimal when the snapshot is built; nothing here is rounded twice.
    """

    total_spent: float = 0.0
    total_refunds: float = 0.0
    net_spending: float = 0.0
    transaction_count: int = 0
    average_transaction: float = 0.0
    biggest_purchase: EnrichedTransaction | None = None
    most_frequent_merchant: MerchantTotal | None = None
    top_categories: tuple[CategoryTotal, ...] = ()
    top_merchants: tuple[MerchantTotal, ...] = ()
    monthly_spending: tuple[MonthlySpending, ...] = ()
    unique_merchants: int = 0
    date_range: DateRange = DateRange()
    foreign_spend: ForeignSpendSummary = ForeignSpendSummary()


class DailyBalance(_Frozen):
    """One day of the running statement balance."""

    day: dt.date
    date_label: str
    spending: float
    payment: float
    balance: float


class StatementSnapshot(_Frozen):
    """Everything a presentation layer needs from one upload, replaced as a unit."""

    dialect: StatementDialect
    currency: str
    currency_locale: str
    transactions: tuple[EnrichedTransaction, ...]
    stats: WrappedStatistics


__all__ = [
    "StatementDialect",
    "DialectProfile",
    "DIALECT_PROFILES",
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
