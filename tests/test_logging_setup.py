from __future__ import annotations

import io
import logging

import pytest
from typer.testing import CliRunner

from statement_wrapped.cli import app
from statement_wrapped.logging_setup import (
    PACKAGE_LOGGER,
    configure_logging,
    get_logger,
    resolve_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, logging.WARNING),
        (logging.DEBUG, logging.DEBUG),
        ("info", logging.INFO),
        (" Error ", logging.ERROR),
        ("15", 15),
        ("chatty", logging.WARNING),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_resolve_level_reads_env(monkeypatch):
    monkeypatch.setenv("STATEMENT_WRAPPED_LOG_LEVEL", "debug")

    assert resolve_level() == logging.DEBUG


def test_configure_logging_installs_one_handler():
    buf = io.StringIO()

    logger = configure_logging("INFO", fmt="%(levelname)s %(message)s", stream=buf)
    configure_logging("DEBUG", stream=io.StringIO())
    get_logger("statement_wrapped.parser").debug("parsed %d rows", 3)

    assert logger.name == PACKAGE_LOGGER
    real = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
    assert len(real) == 1
    assert logger.propagate is False
    # The second call only moved the level; output still goes to the first stream.
    assert buf.getvalue() == "DEBUG parsed 3 rows\n"


def test_library_logging_is_silent_until_configured():
    get_logger("statement_wrapped.stats").warning("not configured")

    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger(PACKAGE_LOGGER).handlers)


def test_cli_log_level_option_emits_flow_timing(uk_csv_path):
    result = CliRunner().invoke(
        app, ["--log-level", "INFO", "summary", "--csv-path", str(uk_csv_path), "--json"]
    )

    assert result.exit_code == 0, result.output
    assert "Loaded uk statement" in result.output


def test_cli_reads_dotenv_from_cwd(tmp_path, mexico_csv_path):
    (tmp_path / ".env").write_text("STATEMENT_WRAPPED_TOP_N=1\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["summary", "--csv-path", str(mexico_csv_path)])

    assert result.exit_code == 0, result.output
    assert "Restaurant" in result.output
    assert "Entertainment" not in result.output
