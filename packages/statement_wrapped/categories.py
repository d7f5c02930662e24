"""Category labels: splitting issuer labels and inferring them from text.

AmEx UK exports carry a ``Main-Sub`` label per row (e.g.
``"General Purchases-Fuel"``). AmEx Mexico exports carry none, so a label is
synthesized from the merchant description with an ordered keyword table.
"""

from __future__ import annotations

import re
from typing import NamedTuple

DEFAULT_CATEGORY = "Other"
UNMATCHED_LABEL = "Other-Other"


def split_category(label: str | None) -> tuple[str, str]:
    """Split ``label`` on its first ``-`` into ``(main, sub)``.

    A blank label (or a blank head) degrades to ``"Other"``; a missing tail is
    ``""``. Neither element is ever ``None``.
    """

    head, _sep, tail = (label or "").partition("-")
    return head.strip() or DEFAULT_CATEGORY, tail.strip()


class KeywordRule(NamedTuple):
    """One row of the keyword decision table: first matching row wins."""

    pattern: re.Pattern[str]
    label: str


# Evaluated top to bottom against the upper-cased description. The order is
# part of the contract (e.g. "UBER EATS" is food before "UBER" is transport).
KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        re.compile(
            r"UBER EATS|RAPPI|DIDI FOOD|REST(?:AURANT)?|CAFE|COFFEE|STARBUCKS|MCDONALD"
            r"|BURGER|PIZZA|TACO|SUSHI|BAR |CANTINA"
        ),
        "Restaurant-Restaurants",
    ),
    KeywordRule(
        re.compile(
            r"WALMART|SUPERMARKET|SUPERCENTER|SORIANA|CHEDRAUI|COSTCO|SAM'S|BODEGA|OXXO"
            r"|7-ELEVEN|MERCADO"
        ),
        "Merchandise & Supplies-Groceries",
    ),
    KeywordRule(
        re.compile(r"UBER(?! EATS)|DIDI|CABIFY|TAXI|GASOLINA|GAS STATION|PEMEX|ESTACION"),
        "Transportation-Travel",
    ),
    KeywordRule(
        re.compile(
            r"NETFLIX|SPOTIFY|DISNEY|PRIME VIDEO|HBO|APPLE.*MUSIC|YOUTUBE|CINEPOLIS"
            r"|CINEMEX|TICKETMASTER"
        ),
        "Entertainment-Entertainment",
    ),
    KeywordRule(
        re.compile(
            r"AMAZON|MERCADOLIBRE|LIVERPOOL|PALACIO|ZARA|H&M|NIKE|ADIDAS|SHEIN|AMERICAN EAGLE"
        ),
        "Merchandise & Supplies-Retail",
    ),
    KeywordRule(
        re.compile(r"PAYPAL|APPLE|GOOGLE|MICROSOFT|ADOBE|CANVA|DROPBOX|NOTION|SLACK"),
        "Business Services-Technology",
    ),
    KeywordRule(
        re.compile(r"MARRIOTT|HILTON|HOTEL|AIRBNB|BOOKING|EXPEDIA|AEROMEXICO|VOLARIS|VIVA"),
        "Travel-Travel",
    ),
    KeywordRule(
        re.compile(r"CFE|TELMEX|IZZI|TOTALPLAY|MEGACABLE|STARLINK|NETFLIX|INTERNET"),
        "Utilities-Services",
    ),
)


def infer_category_label(description: str) -> str:
    """Return a synthesized ``Main-Sub`` label for a merchant description."""

    text = description.upper()
    for rule in KEYWORD_RULES:
        if rule.pattern.search(text):
            return rule.label
    return UNMATCHED_LABEL


__all__ = [
    "DEFAULT_CATEGORY",
    "KEYWORD_RULES",
    "KeywordRule",
    "UNMATCHED_LABEL",
    "infer_category_label",
    "split_category",
]
