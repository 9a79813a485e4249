"""Shared pytest fixtures for arrayprint tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

_EXPECTED_OUTPUT = (
    "Array elements:\n"
    "1 2 3 4 5 \n"
    "Matrix elements:\n"
    "1 2 3 \n"
    "4 5 6 \n"
    "7 8 9 \n"
)


@pytest.fixture
def expected_output() -> str:
    """The exact stdout of a default run, trailing spaces included."""
    return _EXPECTED_OUTPUT


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation, pointing the root
    handler at whatever stderr was current at the time.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("arrayprint")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings resolution."""
    for name in (
        "ARRAYPRINT_CONFIG",
        "ARRAYPRINT_JSON_OUTPUT",
        "ARRAYPRINT_TABLE",
        "ARRAYPRINT_VERBOSE",
        "ARRAYPRINT_LOG_JSON",
        "ARRAYPRINT_OUTPUT__JSON_INDENT",
        "ARRAYPRINT_OUTPUT__TABLE_WIDTH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a temp directory so config walk-up finds only test files."""
    monkeypatch.chdir(tmp_path)
