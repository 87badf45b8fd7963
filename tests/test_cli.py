# tests/test_cli.py
"""
Tests for the TimeLines command-line interface (CLI).

Scope
-----
These tests verify the interaction layer provided by Typer:
1.  **Command Registration**: `render`, `convert`, `settings` and `--help`.
2.  **Argument Validation**: Typer's `exists=True` checks for input files.
3.  **Settings Integration**: persisted settings feed render defaults.
4.  **Error Handling**: render failures exit with code 1 and a readable message.

We use `typer.testing.CliRunner` to invoke the app in-process.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from conftest import FailingProse
from typer.testing import CliRunner

from timelines.cli import app
from timelines.core.config_store import ConfigStore

SOURCE = "2020 | Founded\nStarted **small**.\n\nUndated note"


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


@pytest.fixture  # type: ignore[misc]
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "history.txt"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_cli_help_shows_commands(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    assert "TimeLines" in result.output
    for command in ("render", "convert", "settings"):
        assert command in result.output


def test_render_fails_on_missing_file(runner: CliRunner) -> None:
    result = runner.invoke(app, ["render", "ghost.txt"])
    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_render_html_to_stdout(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(app, ["render", str(source_file)])
    assert result.exit_code == 0, result.output
    assert result.output.startswith('<div class="timeline">')
    assert "<strong>small</strong>" in result.output
    assert result.output.count('class="timeline-marker"') == 2


def test_render_overrides(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(
        app, ["render", str(source_file), "--no-markers", "--default-date-label", "Someday"]
    )
    assert result.exit_code == 0, result.output
    assert "timeline-marker" not in result.output
    assert '<span class="timeline-date">Someday</span>' in result.output


def test_render_uses_persisted_settings(runner: CliRunner, source_file: Path) -> None:
    ConfigStore().update(show_markers=False)
    result = runner.invoke(app, ["render", str(source_file)])
    assert result.exit_code == 0, result.output
    assert "timeline-marker" not in result.output


def test_render_page_to_file(runner: CliRunner, source_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.html"
    result = runner.invoke(
        app, ["render", str(source_file), "--format", "page", "--no-markers", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    page = out.read_text(encoding="utf-8")
    assert page.startswith("<!DOCTYPE html>")
    assert '<body class="timeline-hide-markers">' in page
    assert "<title>history</title>" in page


def test_render_tree_view(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(app, ["render", str(source_file), "--format", "tree"])
    assert result.exit_code == 0, result.output
    assert "timeline-item" in result.output
    assert "Founded" in result.output
    assert "Undated note" in result.output


def test_render_error_exits_with_code_1(runner: CliRunner, source_file: Path) -> None:
    with patch("timelines.cli.MarkdownProseRenderer", return_value=FailingProse()):
        result = runner.invoke(app, ["render", str(source_file)])
    assert result.exit_code == 1, result.output
    assert "Render Error" in result.output
    assert "cannot render" in result.output


def test_convert_rewrites_file(runner: CliRunner, tmp_path: Path) -> None:
    doc = tmp_path / "notes.md"
    doc.write_text("# Notes\n\n```timeline\n2020 | A\n```\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(doc)])
    assert result.exit_code == 0, result.output
    assert "Converted 1 timeline block(s) to HTML." in result.output
    assert '<div class="timeline">' in doc.read_text(encoding="utf-8")


def test_convert_dry_run_keeps_file(runner: CliRunner, tmp_path: Path) -> None:
    doc = tmp_path / "notes.md"
    original = "```timeline\n2020 | A\n```\n"
    doc.write_text(original, encoding="utf-8")

    result = runner.invoke(app, ["convert", str(doc), "--dry-run"])
    assert result.exit_code == 0, result.output
    assert "Dry run" in result.output
    assert doc.read_text(encoding="utf-8") == original


def test_convert_without_blocks_is_informational(runner: CliRunner, tmp_path: Path) -> None:
    doc = tmp_path / "plain.md"
    doc.write_text("Nothing to see.\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(doc)])
    assert result.exit_code == 0, result.output
    assert "No timeline code blocks found in this file." in result.output


def test_settings_show_and_update(runner: CliRunner) -> None:
    shown = runner.invoke(app, ["settings"])
    assert shown.exit_code == 0, shown.output
    assert "Date" in shown.output

    updated = runner.invoke(app, ["settings", "--hide-markers", "-d", "  Undated  "])
    assert updated.exit_code == 0, updated.output
    assert "Undated" in updated.output

    config = ConfigStore().load()
    assert config.show_markers is False
    assert config.default_date_label == "Undated"
