from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from statement_wrapped import (
    EmptyStatementError,
    FormatNotRecognizedError,
    StatementDialect,
    load_statement,
    load_statement_text,
)
from statement_wrapped.cli import app

runner = CliRunner()


def test_load_statement_uk_end_to_end(uk_csv_path: Path):
    snapshot = load_statement(uk_csv_path)

    assert snapshot.dialect is StatementDialect.AMEX_UK
    assert (snapshot.currency, snapshot.currency_locale) == ("GBP", "en-GB")
    assert len(snapshot.transactions) == 5
    assert snapshot.stats.total_spent == 87.79
    assert snapshot.stats.net_spending == 67.79
    # Loading twice yields an equal, independent snapshot.
    assert load_statement(str(uk_csv_path)) == snapshot


def test_load_statement_mexico_end_to_end(mexico_csv_path: Path):
    snapshot = load_statement(mexico_csv_path)

    assert snapshot.dialect is StatementDialect.AMEX_MEXICO
    assert snapshot.currency == "MXN"
    assert snapshot.stats.total_spent == 603.5
    assert snapshot.stats.monthly_spending[-1].month_label == "Jan 2026"


def test_load_statement_text_propagates_parse_errors():
    with pytest.raises(FormatNotRecognizedError):
        load_statement_text("Posted,Payee,Value\n01/01/2025,SHOP,1.00\n")
    with pytest.raises(EmptyStatementError):
        load_statement_text("Fecha,Descripción,Importe\n")


def test_cli_summary_json(uk_csv_path: Path):
    result = runner.invoke(app, ["summary", "--csv-path", str(uk_csv_path), "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["dialect"] == "uk"
    assert payload["currency"] == "GBP"
    assert "transactions" not in payload
    stats = payload["stats"]
    assert stats["total_spent"] == 87.79
    assert stats["date_range"] == {"start": "2025-12-01", "end": "2026-01-01"}
    assert [c["category"] for c in stats["top_categories"]] == [
        "General Purchases",
        "Entertainment",
        "Other",
    ]
    assert stats["biggest_purchase"]["merchant_name"] == "TESCO PETROL"
    assert stats["foreign_spend"]["by_currency"][0]["currency_code"] == "USD"


def test_cli_summary_tables(mexico_csv_path: Path):
    result = runner.invoke(app, ["summary", "--csv-path", str(mexico_csv_path), "--top", "2"])

    assert result.exit_code == 0, result.output
    assert "Top categories" in result.output
    assert "$603.50" in result.output
    assert "Restaurant" in result.output
    # Only the first two categories are shown.
    assert "Merchandise & Supplies" not in result.output


def test_cli_transactions_search(uk_csv_path: Path):
    result = runner.invoke(
        app, ["transactions", "--csv-path", str(uk_csv_path), "--search", "amazon"]
    )

    assert result.exit_code == 0, result.output
    assert "Transactions (2 of 5)" in result.output
    assert "Amazon Marketplace" in result.output
    assert "TESCO" not in result.output


def test_cli_balance(uk_csv_path: Path):
    result = runner.invoke(app, ["balance", "--csv-path", str(uk_csv_path)])

    assert result.exit_code == 0, result.output
    assert "Daily balance" in result.output
    assert "1 Dec" in result.output
    assert "£500.00" in result.output


def test_cli_reports_unrecognized_format(tmp_path: Path):
    bad = tmp_path / "chase.csv"
    bad.write_text("Transaction Date,Post Date,Description,Amount\n", encoding="utf-8")

    result = runner.invoke(app, ["summary", "--csv-path", str(bad)])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert "format not recognized" in result.output


def test_cli_reports_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["summary", "--csv-path", str(tmp_path / "missing.csv")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_cli_top_falls_back_to_env(mexico_csv_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STATEMENT_WRAPPED_TOP_N", "1")

    result = runner.invoke(app, ["summary", "--csv-path", str(mexico_csv_path)])

    assert result.exit_code == 0, result.output
    assert "Restaurant" in result.output
    assert "Entertainment" not in result.output
