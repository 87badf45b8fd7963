"""Shared pytest fixtures.

Every test gets its own settings file under `tmp_path`, so nothing reads or
writes `.timelines.json` in the working directory.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from timelines.core.settings import load_settings
from timelines.render.nodes import Node


@pytest.fixture(autouse=True)  # type: ignore[misc]
def isolated_settings(tmp_path: Path, monkeypatch: Any) -> Generator[Path, None, None]:
    """Point `TIMELINES_SETTINGS_PATH` at a temporary file for each test."""
    path = tmp_path / "timelines-settings.json"
    monkeypatch.setenv("TIMELINES_SETTINGS_PATH", str(path))
    monkeypatch.delenv("TIMELINES_SHOW_MARKERS", raising=False)
    monkeypatch.delenv("TIMELINES_DEFAULT_DATE_LABEL", raising=False)
    load_settings.cache_clear()
    yield path
    load_settings.cache_clear()


class EchoProse:
    """Deterministic prose renderer: wraps the text in a <p> without escaping."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def __call__(self, text: str, target: Node, source_path: str) -> None:
        self.calls.append((text, source_path))
        target.append_markup(f"<p>{text}</p>")


class FailingProse:
    """Prose renderer that always raises, to exercise error propagation."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[str] = []

    async def __call__(self, text: str, target: Node, source_path: str) -> None:
        self.calls.append(text)
        if self.fail_on is None or self.fail_on in text:
            raise RuntimeError(f"cannot render: {text}")
        target.append_markup(f"<p>{text}</p>")


@pytest.fixture  # type: ignore[misc]
def echo_prose() -> EchoProse:
    return EchoProse()
