"""Shared pytest fixtures and configuration for the numconv test suite.

Guidelines
----------
* No terminal interaction — stdin is always a ``StringIO``.
* questionary is mocked at the import helper.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest

from numconv.cli.prompt import TokenReader


@pytest.fixture
def no_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail so the plain-text paths run."""
    for name in ("rich", "rich.console", "rich.table", "rich.markup"):
        monkeypatch.setitem(sys.modules, name, None)


@pytest.fixture
def no_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


@pytest.fixture
def reader_for() -> Callable[[str], TokenReader]:
    """Build a :class:`TokenReader` over canned input text."""

    def _make(text: str) -> TokenReader:
        return TokenReader(stream=io.StringIO(text))

    return _make
