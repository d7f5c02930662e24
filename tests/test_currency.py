import pytest

from statement_wrapped.currency import (
    currency_code_for,
    format_compact_number,
    format_currency,
    parse_foreign_currency,
    round_currency,
    round_percentage,
)
from statement_wrapped.models import ForeignCurrencyDetail


def test_foreign_spend_single_line():
    fc = parse_foreign_currency(
        "Foreign Spend Amount: 12.00 UNITED STATES DOLLAR Commission Amount: 0.27 "
        "Currency Exchange Rate: 1.3363"
    )

    assert fc == ForeignCurrencyDetail(
        foreign_amount=12.0,
        currency="UNITED STATES DOLLAR",
        currency_code="USD",
        commission=0.27,
        exchange_rate=1.3363,
    )


def test_foreign_spend_multi_line_with_grouping_commas():
    fc = parse_foreign_currency(
        "Foreign Spend Amount: 1,234.50 JAPANESE YEN\n"
        "Commission Amount: 0.20\n"
        "Currency Exchange Rate: 190.25"
    )

    assert fc is not None
    assert (fc.foreign_amount, fc.currency, fc.currency_code) == (1234.5, "JAPANESE YEN", "JPY")
    assert (fc.commission, fc.exchange_rate) == (0.2, 190.25)


def test_foreign_spend_optional_fields_default_to_zero():
    fc = parse_foreign_currency("Foreign Spend Amount: 7.18 UNITED STATES DOLLAR")

    assert fc is not None
    assert fc.foreign_amount == 7.18
    assert (fc.commission, fc.exchange_rate) == (0.0, 0.0)


def test_unknown_currency_name_uses_first_three_letters():
    fc = parse_foreign_currency(
        "Foreign Spend Amount: 500.00 GEORGIAN LARI Commission Amount: 0.30 "
        "Currency Exchange Rate: 3.4"
    )

    assert fc is not None
    assert fc.currency == "GEORGIAN LARI"
    assert fc.currency_code == "GEO"


@pytest.mark.parametrize(
    "details",
    [
        None,
        "",
        "Ticket Number: 125 1234567890 Passenger Name: SMITH/J",
        "Foreign Spend Amount: n/a",
    ],
)
def test_no_foreign_detail(details):
    assert parse_foreign_currency(details) is None


def test_currency_code_lookup_normalizes_whitespace_and_case():
    assert currency_code_for("european  union\neuro") == "EUR"
    assert currency_code_for("Qatari Riyal") == "QAR"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2.675, 2.68), (-2.675, -2.68), (0.125, 0.13), (10.0, 10.0), (-0.001, 0.0), (87.78999999999999, 87.79)],
)
def test_round_currency_half_away_from_zero(value, expected):
    assert round_currency(value) == expected


def test_round_percentage():
    assert round_percentage(57.85) == 57.9
    assert round_percentage(-0.05) == -0.1
    assert round_percentage(33.333333) == 33.3


def test_format_currency():
    assert format_currency(1234.5, "GBP", "en-GB") == "£1,234.50"
    assert format_currency(-12, "MXN", "es-MX") == "-$12.00"
    assert format_currency(5, "CHF", "en-GB") == "CHF 5.00"
    assert format_currency(1234.5, "EUR", "de-DE") == "€1.234,50"


def test_format_compact_number():
    assert format_compact_number(1_500_000) == "1.5M"
    assert format_compact_number(2300) == "2.3K"
    assert format_compact_number(999) == "999"
    assert format_compact_number(12.5) == "12.5"
