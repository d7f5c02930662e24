"""Aggregation engine: enriched transactions → :class:`WrappedStatistics`.

Every function here is pure: inputs are read once, never mutated, and the same
input always yields an equal result. Payments settle the account rather than
describe spending, so they are excluded everywhere except the statement date
range and the daily balance series.

Grouped figures are *net* totals (purchases minus refunds). Internal sums keep
full float precision; rounding to cents (and to 0.1 for percentages) happens
once, when a value is placed in an output model.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .currency import round_currency, round_percentage
from .models import (
    CategoryTotal,
    CurrencySpend,
    DailyBalance,
    DateRange,
    EnrichedTransaction,
    ForeignSpendSummary,
    MerchantTotal,
    MonthlySpending,
    WrappedStatistics,
)

TOP_N = 10

# Fixed English labels; ``calendar.month_abbr`` follows the process locale.
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(slots=True)
class _Bucket:
    purchases: float = 0.0
    refunds: float = 0.0
    purchase_count: int = 0
    refund_count: int = 0

    def add(self, t: EnrichedTransaction) -> None:
        if t.is_refund:
            self.refunds += t.absolute_amount
            self.refund_count += 1
        else:
            self.purchases += t.absolute_amount
            self.purchase_count += 1

    @property
    def net(self) -> float:
        return self.purchases - self.refunds

    @property
    def count(self) -> int:
        return self.purchase_count + self.refund_count


@dataclass(slots=True)
class _CurrencyBucket:
    currency: str
    foreign: float = 0.0
    home: float = 0.0
    count: int = 0


def _spending(transactions: Iterable[EnrichedTransaction]) -> list[EnrichedTransaction]:
    return [t for t in transactions if not t.is_payment]


def _group(
    transactions: Iterable[EnrichedTransaction], key: Callable[[EnrichedTransaction], str]
) -> dict[str, _Bucket]:
    # dict preserves first-seen order, which the stable sorts below rely on for ties.
    buckets: dict[str, _Bucket] = {}
    for t in transactions:
        if t.is_payment:
            continue
        buckets.setdefault(key(t), _Bucket()).add(t)
    return buckets


def _positive_by_net(buckets: dict[str, _Bucket]) -> list[tuple[str, _Bucket]]:
    # Judge on the published (rounded) net so float residue like 0.1 + 0.2 - 0.3
    # never surfaces as a 0.00 entry.
    items = [(k, b) for k, b in buckets.items() if round_currency(b.net) > 0]
    items.sort(key=lambda kv: kv[1].net, reverse=True)
    return items


def month_label(month_key: str) -> str:
    """``"2025-01"`` → ``"Jan 2025"``."""

    year, month = month_key.split("-")
    return f"{_MONTH_ABBR[int(month) - 1]} {year}"


# ---------------------------------------------------------------------------
# Grouped totals
# ---------------------------------------------------------------------------


def calculate_category_totals(
    transactions: Iterable[EnrichedTransaction],
) -> list[CategoryTotal]:
    """Net spend per main category, largest first.

    Categories netting to zero or less (fully refunded) are dropped.
    ``percentage`` is the share of the sum of all remaining category totals.
    """

    ranked = _positive_by_net(_group(transactions, lambda t: t.main_category))
    denominator = sum(b.net for _, b in ranked)
    return [
        CategoryTotal(
            category=name,
            total=round_currency(b.net),
            count=b.count,
            percentage=round_percentage(b.net / denominator * 100) if denominator > 0 else 0.0,
        )
        for name, b in ranked
    ]


def calculate_merchant_totals(
    transactions: Iterable[EnrichedTransaction],
) -> list[MerchantTotal]:
    """Net spend per cleaned merchant name, largest first.

    ``count`` is the number of purchases (visits); refunds reduce the total but
    never the visit count. Refund-only merchants are dropped.
    """

    ranked = _positive_by_net(_group(transactions, lambda t: t.merchant_name))
    return [
        MerchantTotal(
            merchant_name=name,
            total=round_currency(b.net),
            count=b.purchase_count,
            average_transaction=(
                round_currency(b.net / b.purchase_count) if b.purchase_count else 0.0
            ),
        )
        for name, b in ranked
    ]


def calculate_monthly_spending(
    transactions: Iterable[EnrichedTransaction],
) -> list[MonthlySpending]:
    """Net spend per calendar month in chronological order, floored at zero."""

    buckets = _group(transactions, lambda t: t.month_key)
    return [
        MonthlySpending(
            month=key,
            month_label=month_label(key),
            total=round_currency(max(b.net, 0.0)),
            count=b.count,
        )
        for key, b in sorted(buckets.items())
    ]


def calculate_foreign_spend(transactions: Iterable[EnrichedTransaction]) -> ForeignSpendSummary:
    """Summarize purchases settled in a foreign currency.

    Refunds carrying foreign detail are left out entirely rather than netted.
    ``total_home`` is in the statement's home currency.
    """

    total_home = 0.0
    total_commission = 0.0
    count = 0
    groups: dict[str, _CurrencyBucket] = {}
    for t in transactions:
        fc = t.foreign_currency
        if fc is None or not t.is_purchase:
            continue
        total_home += t.absolute_amount
        total_commission += fc.commission
        count += 1
        g = groups.setdefault(fc.currency_code, _CurrencyBucket(currency=fc.currency))
        g.foreign += fc.foreign_amount
        g.home += t.absolute_amount
        g.count += 1

    ordered = sorted(groups.items(), key=lambda kv: kv[1].home, reverse=True)
    return ForeignSpendSummary(
        total_home=round_currency(total_home),
        total_commission=round_currency(total_commission),
        transaction_count=count,
        by_currency=tuple(
            CurrencySpend(
                currency_code=code,
                currency=g.currency,
                total_foreign=round_currency(g.foreign),
                total_home=round_currency(g.home),
                transaction_count=g.count,
            )
            for code, g in ordered
        ),
    )


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


def calculate_wrapped_stats(transactions: Iterable[EnrichedTransaction]) -> WrappedStatistics:
    """Compute the full statistics snapshot for one statement.

    An empty input yields the zero-valued snapshot (no error).
    """

    all_txns = tuple(transactions)
    if not all_txns:
        return WrappedStatistics()

    spending = _spending(all_txns)
    charges = [t for t in spending if t.is_purchase]

    total_spent = sum(t.absolute_amount for t in charges)
    total_refunds = sum(t.absolute_amount for t in spending if t.is_refund)

    biggest: EnrichedTransaction | None = None
    for t in charges:
        if biggest is None or t.absolute_amount > biggest.absolute_amount:
            biggest = t

    merchants = calculate_merchant_totals(spending)
    most_frequent: MerchantTotal | None = None
    for m in merchants:
        if most_frequent is None or m.count > most_frequent.count:
            most_frequent = m

    dates = [t.parsed_date for t in all_txns]

    return WrappedStatistics(
        total_spent=round_currency(total_spent),
        total_refunds=round_currency(total_refunds),
        net_spending=round_currency(total_spent - total_refunds),
        transaction_count=len(spending),
        average_transaction=round_currency(total_spent / len(charges)) if charges else 0.0,
        biggest_purchase=biggest,
        most_frequent_merchant=most_frequent,
        top_categories=tuple(calculate_category_totals(spending)[:TOP_N]),
        top_merchants=tuple(merchants[:TOP_N]),
        monthly_spending=tuple(calculate_monthly_spending(spending)),
        unique_merchants=len({t.merchant_name for t in spending}),
        date_range=DateRange(start=min(dates), end=max(dates)),
        foreign_spend=calculate_foreign_spend(spending),
    )


aggregate = calculate_wrapped_stats


# ---------------------------------------------------------------------------
# Supplemental views
# ---------------------------------------------------------------------------


def calculate_daily_balance(transactions: Iterable[EnrichedTransaction]) -> list[DailyBalance]:
    """Running statement balance per calendar day, oldest first.

    ``spending`` is purchases minus refunds for the day, ``payment`` the sum of
    payments, and ``balance`` the running total of ``spending - payment``.
    """

    days: dict[dt.date, list[float]] = {}
    for t in transactions:
        entry = days.setdefault(t.parsed_date, [0.0, 0.0])
        if t.is_payment:
            entry[1] += t.absolute_amount
        elif t.is_refund:
            entry[0] -= t.absolute_amount
        else:
            entry[0] += t.absolute_amount

    running = 0.0
    series: list[DailyBalance] = []
    for day in sorted(days):
        spending, payment = days[day]
        running += spending - payment
        series.append(
            DailyBalance(
                day=day,
                date_label=f"{day.day} {_MONTH_ABBR[day.month - 1]}",
                spending=round_currency(spending),
                payment=round_currency(payment),
                balance=round_currency(running),
            )
        )
    return series


def peak_month(stats: WrappedStatistics) -> MonthlySpending | None:
    """The month with the highest total (earliest wins ties)."""

    best: MonthlySpending | None = None
    for m in stats.monthly_spending:
        if best is None or m.total > best.total:
            best = m
    return best


def search_transactions(
    transactions: Sequence[EnrichedTransaction], query: str | None
) -> list[EnrichedTransaction]:
    """Case-insensitive substring filter over merchant, category and description."""

    needle = (query or "").strip().lower()
    if not needle:
        return list(transactions)
    return [
        t
        for t in transactions
        if needle in t.merchant_name.lower()
        or needle in t.main_category.lower()
        or needle in t.description.lower()
    ]


__all__ = [
    "TOP_N",
    "aggregate",
    "calculate_category_totals",
    "calculate_daily_balance",
    "calculate_foreign_spend",
    "calculate_merchant_totals",
    "calculate_monthly_spending",
    "calculate_wrapped_stats",
    "month_label",
    "peak_month",
    "search_transactions",
]
