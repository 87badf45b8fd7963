"""Tests for batch conversion of ```timeline blocks to static HTML."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from conftest import EchoProse, FailingProse

from timelines.core.config_store import ConfigStore
from timelines.core.contracts.config import RenderConfiguration
from timelines.pipelines.convert import (
    NO_BLOCKS_MESSAGE,
    convert_timeline_blocks,
    convert_timeline_file,
)

DOC = """# History

```timeline
2020 | Founded
Started.
```

Some prose between.

```python
print("untouched")
```

```timeline
2021 | Grew
```
"""


def test_converts_every_block_in_place(echo_prose: EchoProse) -> None:
    report = asyncio.run(
        convert_timeline_blocks(DOC, RenderConfiguration(show_markers=False), "h.md", echo_prose)
    )
    assert report.converted == 2
    assert report.message == "Converted 2 timeline block(s) to HTML."
    assert "```timeline" not in report.content
    assert report.content.startswith("# History\n\n<div class=\"timeline\">")
    assert "Some prose between." in report.content
    assert 'print("untouched")' in report.content
    assert report.content.index("Founded") < report.content.index("Grew")


def test_blank_block_converts_to_empty_indicator(echo_prose: EchoProse) -> None:
    """A blank line between the fences converts to the empty indicator."""
    doc = "```timeline\n\n```\n"
    report = asyncio.run(convert_timeline_blocks(doc, RenderConfiguration(), "x.md", echo_prose))
    assert report.converted == 1
    assert "No timeline entries found." in report.content


def test_no_blocks_is_reported_not_raised(echo_prose: EchoProse) -> None:
    doc = "# Nothing here\n\n```python\nx = 1\n```\n"
    report = asyncio.run(convert_timeline_blocks(doc, RenderConfiguration(), "x.md", echo_prose))
    assert report.converted == 0
    assert report.content == doc
    assert report.message == NO_BLOCKS_MESSAGE


def test_convert_file_writes_only_when_changed(tmp_path: Path, echo_prose: EchoProse) -> None:
    doc = tmp_path / "notes.md"
    doc.write_text(DOC, encoding="utf-8")

    report = asyncio.run(convert_timeline_file(doc, RenderConfiguration(), echo_prose))
    assert report.written is True
    assert doc.read_text(encoding="utf-8") == report.content

    again = asyncio.run(convert_timeline_file(doc, RenderConfiguration(), echo_prose))
    assert again.converted == 0
    assert again.written is False


def test_convert_file_dry_run(tmp_path: Path, echo_prose: EchoProse) -> None:
    doc = tmp_path / "notes.md"
    doc.write_text(DOC, encoding="utf-8")
    report = asyncio.run(convert_timeline_file(doc, RenderConfiguration(), echo_prose, dry_run=True))
    assert report.converted == 2
    assert report.written is False
    assert doc.read_text(encoding="utf-8") == DOC


def test_convert_file_uses_persisted_settings(tmp_path: Path, echo_prose: EchoProse) -> None:
    ConfigStore().update(show_markers=False)
    doc = tmp_path / "notes.md"
    doc.write_text("```timeline\n2020 | A\n```\n", encoding="utf-8")
    report = asyncio.run(convert_timeline_file(doc, prose=echo_prose))
    assert "timeline-marker" not in report.content


def test_render_failure_leaves_file_untouched(tmp_path: Path) -> None:
    doc = tmp_path / "notes.md"
    doc.write_text(DOC, encoding="utf-8")
    with pytest.raises(RuntimeError):
        asyncio.run(convert_timeline_file(doc, RenderConfiguration(), FailingProse()))
    assert doc.read_text(encoding="utf-8") == DOC
