"""Purchase / refund / payment classification.

The decision order matters: a payment acknowledgement wins over the sign of
the amount, so a negative "PAYMENT RECEIVED" line is a payment, never a refund.
The pattern list is shared by both statement dialects.
"""

from __future__ import annotations

import re

from .models import TransactionKind

PAYMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^PAYMENT RECEIVED", re.IGNORECASE),
    re.compile(r"^PAYMENT\s*[-–—]\s*THANK YOU", re.IGNORECASE),
    re.compile(r"^DIRECT DEBIT PAYMENT", re.IGNORECASE),
    # AmEx Mexico: "Thank you for your payment"
    re.compile(r"^GRACIAS POR SU PAGO", re.IGNORECASE),
)


def is_payment_description(description: str) -> bool:
    text = description.strip()
    return any(p.search(text) for p in PAYMENT_PATTERNS)


def classify_transaction(description: str, amount: float) -> TransactionKind:
    """Return the single :class:`TransactionKind` for a statement line."""

    if is_payment_description(description):
        return TransactionKind.PAYMENT
    if amount < 0:
        return TransactionKind.REFUND
    return TransactionKind.PURCHASE


__all__ = ["PAYMENT_PATTERNS", "classify_transaction", "is_payment_description"]
