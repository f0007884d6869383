"""Shared pytest fixtures for charwin tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from charwin.domain.geometry import Point
from charwin.domain.grid import Grid
from charwin.domain.shapes import Square
from charwin.services.console import ConsoleService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def grid() -> Grid:
    """A 6x4 window with the default fill."""
    return Grid(6, 4)


@pytest.fixture
def patterned() -> Grid:
    """A 4x3 window where each cell holds a distinct letter (row-major a..l)."""
    g = Grid(4, 3)
    letters = iter("abcdefghijkl")
    for y in range(3):
        for x in range(4):
            g.draw(Point(x, y), Square(1, 1), next(letters))
    return g


@pytest.fixture
def session() -> ConsoleService:
    """Console session with a 10x10 window."""
    return ConsoleService(10, 10)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run in an empty directory so no stray charwin.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CHARWIN_CONFIG", raising=False)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    charwin_logger = logging.getLogger("charwin")
    charwin_level = charwin_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    charwin_logger.setLevel(charwin_level)
