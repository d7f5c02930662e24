# ruff: noqa: I001
"""CLI for the ``statement_wrapped`` package.

A Typer-based console interface over the library: parse a statement export and
render the wrapped summary, the transaction table or the daily balance with
``rich``. Environment variables are loaded from a local ``.env`` using
``python-dotenv`` before any command runs. Business logic lives in
``statement_wrapped.api``; this module only formats.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from typer.models import OptionInfo

from .currency import format_currency
from .errors import StatementParseError
from .logging_setup import configure_logging
from .models import StatementSnapshot


# ---- Small module-level helpers used by CLI commands -------------------------


def _resolve_top_n(top: int | None) -> int:
    """Resolve the table row limit.

    Honors an explicit ``--top`` first, then ``STATEMENT_WRAPPED_TOP_N``, and
    falls back to 10. Non-positive or unparseable values are ignored.
    """

    if top is not None and top > 0:
        return top
    env_val = os.getenv("STATEMENT_WRAPPED_TOP_N")
    try:
        from_env = int(env_val) if env_val else None
    except ValueError:
        from_env = None
    if from_env is not None and from_env > 0:
        return from_env
    return 10


def _load_or_exit(csv_path: Path) -> StatementSnapshot:
    """Load a snapshot, printing ``Error: ...`` and exiting 1 on failure."""

    from .workflows.wrapped_flow import load_statement

    try:
        return load_statement(csv_path)
    except FileNotFoundError:
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {csv_path}", file=sys.stderr)
    except UnicodeDecodeError as e:
        print(f"Error: '{csv_path}' is not UTF-8 text: {e}", file=sys.stderr)
    except StatementParseError as e:
        print(f"Error: Failed to parse statement: {e}", file=sys.stderr)
    raise typer.Exit(1)


def render_summary(snapshot: StatementSnapshot, *, console: Console, top_n: int = 10) -> None:
    """Render headline figures and the ranked tables for ``snapshot``."""

    stats = snapshot.stats

    def money(v: float) -> str:
        return format_currency(v, snapshot.currency, snapshot.currency_locale)

    headline = Table(title=f"Statement wrapped ({snapshot.dialect.value}, {snapshot.currency})")
    headline.add_column("Figure")
    headline.add_column("Value", justify="right")
    headline.add_row("Total spent", money(stats.total_spent))
    headline.add_row("Refunds", money(stats.total_refunds))
    headline.add_row("Net spending", money(stats.net_spending))
    headline.add_row("Transactions", str(stats.transaction_count))
    headline.add_row("Average purchase", money(stats.average_transaction))
    headline.add_row("Unique merchants", str(stats.unique_merchants))
    if stats.date_range.start and stats.date_range.end:
        headline.add_row(
            "Period", f"{stats.date_range.start.isoformat()} → {stats.date_range.end.isoformat()}"
        )
    if stats.biggest_purchase is not None:
        bp = stats.biggest_purchase
        headline.add_row("Biggest purchase", f"{bp.merchant_name} ({money(bp.absolute_amount)})")
    if stats.most_frequent_merchant is not None:
        mf = stats.most_frequent_merchant
        headline.add_row("Most visited", f"{mf.merchant_name} ({mf.count} visits)")
    console.print(headline)

    categories = Table(title="Top categories")
    categories.add_column("Category")
    categories.add_column("Total", justify="right")
    categories.add_column("Count", justify="right")
    categories.add_column("%", justify="right")
    for c in stats.top_categories[:top_n]:
        categories.add_row(c.category, money(c.total), str(c.count), f"{c.percentage:.1f}")
    console.print(categories)

    merchants = Table(title="Top merchants")
    merchants.add_column("Merchant")
    merchants.add_column("Total", justify="right")
    merchants.add_column("Visits", justify="right")
    merchants.add_column("Average", justify="right")
    for m in stats.top_merchants[:top_n]:
        merchants.add_row(m.merchant_name, money(m.total), str(m.count), money(m.average_transaction))
    console.print(merchants)

    months = Table(title="Monthly spending")
    months.add_column("Month")
    months.add_column("Total", justify="right")
    months.add_column("Count", justify="right")
    for mo in stats.monthly_spending:
        months.add_row(mo.month_label, money(mo.total), str(mo.count))
    console.print(months)

    fx = stats.foreign_spend
    if fx.transaction_count:
        foreign = Table(title="Foreign spend")
        foreign.add_column("Currency")
        foreign.add_column("Foreign total", justify="right")
        foreign.add_column(f"{snapshot.currency} total", justify="right")
        foreign.add_column("Count", justify="right")
        for cur in fx.by_currency:
            foreign.add_row(
                f"{cur.currency_code} ({cur.currency})",
                f"{cur.total_foreign:,.2f}",
                money(cur.total_home),
                str(cur.transaction_count),
            )
        console.print(foreign)
        console.print(f"Commission paid: {money(fx.total_commission)}")


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Summarize an American Express (UK or Mexico) CSV statement export: "
        "totals, categories, merchants, months and foreign spend."
    ),
)


# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults). Typer will inspect this when used as a default value below.
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--csv-path",
    help="Path to an AmEx UK or AmEx Mexico CSV export",
    dir_okay=False,
    file_okay=True,
    exists=False,  # allow non-existent here; the handler reports nice errors
    readable=True,
)


@app.command("summary")
def summary_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON."),
    top: int | None = typer.Option(
        None, help="Rows per ranked table (falls back to STATEMENT_WRAPPED_TOP_N, then 10)."
    ),
) -> None:
    """Print the wrapped summary for a statement."""

    snapshot = _load_or_exit(csv_path)
    if as_json:
        payload = snapshot.model_dump(mode="json", exclude={"transactions"})
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    render_summary(snapshot, console=Console(), top_n=_resolve_top_n(top))


@app.command("transactions")
def transactions_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    search: str | None = typer.Option(
        None, help="Only show rows whose merchant, category or description contains this text."
    ),
) -> None:
    """List enriched transactions, optionally filtered."""

    from .stats import search_transactions

    snapshot = _load_or_exit(csv_path)
    rows = search_transactions(snapshot.transactions, search)

    table = Table(title=f"Transactions ({len(rows)} of {len(snapshot.transactions)})")
    table.add_column("Date")
    table.add_column("Merchant")
    table.add_column("Category")
    table.add_column("Amount", justify="right")
    table.add_column("Kind")
    for t in rows:
        shown = format_currency(t.absolute_amount, snapshot.currency, snapshot.currency_locale)
        table.add_row(
            t.parsed_date.isoformat(),
            t.merchant_name,
            t.main_category,
            f"+{shown}" if t.is_refund else shown,
            t.kind.value,
        )
    Console().print(table)


@app.command("balance")
def balance_cmd(csv_path: Annotated[Path, CSV_PATH_OPTION]) -> None:
    """Show the running statement balance per day."""

    from .stats import calculate_daily_balance

    snapshot = _load_or_exit(csv_path)

    def money(v: float) -> str:
        return format_currency(v, snapshot.currency, snapshot.currency_locale)

    table = Table(title="Daily balance")
    table.add_column("Day")
    table.add_column("Spending", justify="right")
    table.add_column("Payments", justify="right")
    table.add_column("Balance", justify="right")
    for day in calculate_daily_balance(snapshot.transactions):
        table.add_row(day.date_label, money(day.spending), money(day.payment), money(day.balance))
    Console().print(table)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    *,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, ...). Overrides STATEMENT_WRAPPED_LOG_LEVEL.",
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging(log_level)

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
