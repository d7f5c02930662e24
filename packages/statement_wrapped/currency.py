"""Currency helpers: foreign-spend extraction, rounding, and display formatting.

The home currency and locale always arrive as explicit arguments (they travel
on :class:`~statement_wrapped.models.ParseResult` and
:class:`~statement_wrapped.models.StatementSnapshot`); nothing in this module
keeps a "current currency".
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from .logging_setup import get_logger
from .models import ForeignCurrencyDetail

_logger = get_logger("statement_wrapped.currency")

# Currency names as printed in AmEx "Extended Details" → ISO 4217 code.
CURRENCY_CODES: dict[str, str] = {
    "UNITED STATES DOLLAR": "USD",
    "EUROPEAN UNION EURO": "EUR",
    "JAPANESE YEN": "JPY",
    "BRITISH POUND": "GBP",
    "AUSTRALIAN DOLLAR": "AUD",
    "CANADIAN DOLLAR": "CAD",
    "SWISS FRANC": "CHF",
    "CHINESE YUAN": "CNY",
    "HONG KONG DOLLAR": "HKD",
    "SINGAPORE DOLLAR": "SGD",
    "THAI BAHT": "THB",
    "INDIAN RUPEE": "INR",
    "MEXICAN PESO": "MXN",
    "SOUTH AFRICAN RAND": "ZAR",
    "NEW ZEALAND DOLLAR": "NZD",
    "SWEDISH KRONA": "SEK",
    "NORWEGIAN KRONE": "NOK",
    "DANISH KRONE": "DKK",
    "POLISH ZLOTY": "PLN",
    "CZECH KORUNA": "CZK",
    "HUNGARIAN FORINT": "HUF",
    "TURKISH LIRA": "TRY",
    "ISRAELI SHEKEL": "ILS",
    "UNITED ARAB EMIRATES DIRHAM": "AED",
    "SAUDI RIYAL": "SAR",
    "BRAZILIAN REAL": "BRL",
    "COSTA RICA COLON": "CRC",
    "SERBIAN DINAR": "RSD",
    "QATARI RIAL": "QAR",
    "QATARI RIYAL": "QAR",
    "MALAYSIAN RINGGIT": "MYR",
    "PHILIPPINE PESO": "PHP",
    "INDONESIAN RUPIAH": "IDR",
    "KOREAN WON": "KRW",
    "SOUTH KOREAN WON": "KRW",
    "TAIWANESE DOLLAR": "TWD",
    "VIETNAMESE DONG": "VND",
    "EGYPTIAN POUND": "EGP",
    "MOROCCAN DIRHAM": "MAD",
    "ICELANDIC KRONA": "ISK",
    "CROATIAN KUNA": "HRK",
    "ROMANIAN LEU": "RON",
    "BULGARIAN LEV": "BGN",
}

FOREIGN_SPEND_MARKER = "Foreign Spend Amount:"

_FOREIGN_AMOUNT_RE = re.compile(
    r"Foreign Spend Amount:\s*([\d,.]+)\s+([A-Z\s]+?)(?:\s+Commission|$)", re.IGNORECASE
)
_COMMISSION_RE = re.compile(r"Commission Amount:\s*([\d,.]+)", re.IGNORECASE)
_EXCHANGE_RATE_RE = re.compile(r"Currency Exchange Rate:\s*([\d,.]+)", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")

_CENT = Decimal("0.01")
_TENTH = Decimal("0.1")


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------


def _round_half_away(value: float, quantum: Decimal) -> float:
    # Decimal(repr(x)) rounds the value as printed (2.675 -> 2.68), not its
    # binary approximation. ROUND_HALF_UP is "away from zero" for Decimal.
    q = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    result = float(q)
    return 0.0 if result == 0 else result


def round_currency(value: float) -> float:
    """Round a currency amount to cents, half away from zero."""
    return _round_half_away(value, _CENT)


def round_percentage(value: float) -> float:
    """Round a percentage to one decimal place, half away from zero."""
    return _round_half_away(value, _TENTH)


# ---------------------------------------------------------------------------
# Foreign spend extraction
# ---------------------------------------------------------------------------


def _parse_number(raw: str) -> float:
    """Parse a statement number, stripping grouping commas first.

    Only the leading numeric portion is considered, so stray trailing
    punctuation picked up by the ``[\\d,.]+`` capture (``"12.00."``) is ignored.
    """

    cleaned = raw.replace(",", "")
    m = _LEADING_NUMBER_RE.match(cleaned)
    if m is None:
        raise ValueError(f"invalid number: {raw!r}")
    return float(m.group(0))


def currency_code_for(name: str) -> str:
    """Resolve a printed currency name to its three-letter code.

    Unknown names fall back to their first three letters, upper-cased.
    """

    key = " ".join(name.split()).upper()
    return CURRENCY_CODES.get(key) or key[:3]


def parse_foreign_currency(extended_details: str | None) -> ForeignCurrencyDetail | None:
    """Extract foreign-spend details from an AmEx "Extended Details" blob.

    Example input::

        Foreign Spend Amount: 12.00 UNITED STATES DOLLAR Commission Amount: 0.27
        Currency Exchange Rate: 1.3363

    Returns ``None`` when the blob carries no foreign-spend marker or when the
    amount/currency portion cannot be read. Commission and exchange rate are
    optional and default to ``0``.
    """

    if not extended_details or FOREIGN_SPEND_MARKER not in extended_details:
        return None

    try:
        m = _FOREIGN_AMOUNT_RE.search(extended_details)
        if m is None:
            return None
        foreign_amount = _parse_number(m.group(1))
        currency = " ".join(m.group(2).split())
        if not currency:
            return None

        cm = _COMMISSION_RE.search(extended_details)
        commission = _parse_number(cm.group(1)) if cm else 0.0
        rm = _EXCHANGE_RATE_RE.search(extended_details)
        exchange_rate = _parse_number(rm.group(1)) if rm else 0.0
    except ValueError as exc:
        _logger.debug("Ignoring unreadable foreign spend details: %s", exc)
        return None

    return ForeignCurrencyDetail(
        foreign_amount=foreign_amount,
        currency=currency,
        currency_code=currency_code_for(currency),
        commission=commission,
        exchange_rate=exchange_rate,
    )


# ---------------------------------------------------------------------------
# Display formatting
# ---------------------------------------------------------------------------

_CURRENCY_SYMBOLS: dict[str, str] = {
    "GBP": "£",
    "MXN": "$",
    "USD": "$",
    "EUR": "€",
    "JPY": "¥",
}

# Locales that write 1.234,56 rather than 1,234.56.
_COMMA_DECIMAL_LOCALES = {"de-DE", "es-ES", "fr-FR", "it-IT", "pt-BR"}


def format_currency(amount: float, currency: str = "GBP", locale: str = "en-GB") -> str:
    """Format ``amount`` for display, e.g. ``£1,234.50`` or ``-$12.00``.

    ``en-GB`` and ``es-MX`` (the two statement locales) both group with ``,``
    and use ``.`` for decimals.
    """

    value = round_currency(amount)
    body = f"{abs(value):,.2f}"
    if locale in _COMMA_DECIMAL_LOCALES:
        body = body.replace(",", "\0").replace(".", ",").replace("\0", ".")
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    text = f"{symbol}{body}" if symbol else f"{currency.upper()} {body}"
    return f"-{text}" if value < 0 else text


def format_compact_number(num: float) -> str:
    """Abbreviate large numbers: ``1500000 -> "1.5M"``, ``2300 -> "2.3K"``."""

    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


__all__ = [
    "CURRENCY_CODES",
    "FOREIGN_SPEND_MARKER",
    "currency_code_for",
    "format_compact_number",
    "format_currency",
    "parse_foreign_currency",
    "round_currency",
    "round_percentage",
]
