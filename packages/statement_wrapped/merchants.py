"""Merchant-name cleanup for statement descriptions.

Issuers append location text, store numbers and payment-processor references
to the merchant name (``"TESCO PETROL 3731      LONDON"``,
``"UBER   *TRIP"``). :func:`extract_merchant_name` reduces a description to a
name suitable for grouping. The cleanup is lossy: any trailing digits are
removed, including digits that belong to the brand.
"""

from __future__ import annotations

import re

_LOCATION_GAP_RE = re.compile(r"\s{2,}")
# A standalone store number (3+ digits, never the first token) followed by
# optional location words; only used when the location gap was collapsed.
# Lossy: it widens the trailing-digit rule, so "ACME 2000 LTD" becomes "ACME".
_STORE_NUMBER_TAIL_RE = re.compile(r"(?<=\S)\s+\d{3,}(?:\s+.*)?$")
_REFERENCE_SUFFIX_RE = re.compile(r"\*\w+$")
_TRAILING_DIGITS_RE = re.compile(r"\d+$")

# Literal rewrites for marketplace / aggregator prefixes, applied in order.
AGGREGATOR_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^AMZNMKTPLACE"), "Amazon Marketplace"),
    (re.compile(r"^AMAZON\.CO\.UK"), "Amazon"),
    (re.compile(r"^PADDLE\.NET\*"), ""),
    (re.compile(r"^SP "), ""),
)


def extract_merchant_name(description: str) -> str:
    """Return a cleaned merchant name, or ``description`` if nothing is left."""

    parts = _LOCATION_GAP_RE.split(description.strip(), maxsplit=1)
    name = parts[0]
    if len(parts) == 1:
        name = _STORE_NUMBER_TAIL_RE.sub("", name)

    name = _REFERENCE_SUFFIX_RE.sub("", name).strip()

    for pattern, replacement in AGGREGATOR_REWRITES:
        name = pattern.sub(replacement, name)
    name = _TRAILING_DIGITS_RE.sub("", name).strip()

    return name or description


__all__ = ["AGGREGATOR_REWRITES", "extract_merchant_name"]
