"""Shared pytest fixtures for personcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed evaluation instant for date rules."""
    return datetime(2024, 6, 15, 12, 30, 0)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no personcheck env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so a stray
    ``personcheck.toml`` above the checkout can't leak into tests.
    """
    for var in ("PERSONCHECK_CONFIG", "PERSONCHECK_OUTPUT__WIDTH", "PERSONCHECK_OUTPUT__NO_COLOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo CLI-driven logging configuration after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pc = logging.getLogger("personcheck")
    pc_level = pc.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pc.setLevel(pc_level)
