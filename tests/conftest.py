"""Pytest configuration for test isolation.

The CLI reads ``.env`` from the current working directory and honors
``STATEMENT_WRAPPED_*`` environment variables. To keep tests hermetic, each
test runs from its own temporary directory with those variables cleared.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Make sure the workspace `packages/` dir is on sys.path so `statement_wrapped`
# is importable without an editable install.
_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
if str(_PKG_DIR) not in sys.path:
    sys.path.insert(0, str(_PKG_DIR))

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test from a clean CWD with no package env overrides.

    Logging is reset afterwards so a handler bound to one test's captured
    stderr never leaks into the next.
    """

    from statement_wrapped.logging_setup import reset_logging

    for var in ("STATEMENT_WRAPPED_LOG_LEVEL", "STATEMENT_WRAPPED_TOP_N"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()


@pytest.fixture
def uk_csv_path() -> Path:
    return DATA_DIR / "amex_uk_sample.csv"


@pytest.fixture
def mexico_csv_path() -> Path:
    return DATA_DIR / "amex_mexico_sample.csv"
