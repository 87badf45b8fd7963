"""Tests for the static (HTML string) renderer and its parity with the live tree."""

from __future__ import annotations

import asyncio
import re

import pytest
from conftest import EchoProse, FailingProse

from timelines.core.contracts.config import RenderConfiguration
from timelines.core.contracts.entry import TimelineEntry
from timelines.parsing.segmenter import parse_timeline_source
from timelines.render.escaping import unescape_html
from timelines.render.live import render_timeline_entries
from timelines.render.nodes import Node
from timelines.render.static import render_timeline_document, render_timeline_html


def _html(source: str, config: RenderConfiguration, prose: object) -> str:
    return asyncio.run(render_timeline_html(source, config, "notes/a.md", prose))  # type: ignore[arg-type]


def test_empty_source(echo_prose: EchoProse) -> None:
    html = _html("  \n\n ", RenderConfiguration(show_markers=True), echo_prose)
    assert html == (
        '<div class="timeline"><div class="timeline-empty">No timeline entries found.</div></div>'
    )


def test_full_structure(echo_prose: EchoProse) -> None:
    html = _html("2020 | Founded\nStarted.", RenderConfiguration(), echo_prose)
    assert html == (
        '<div class="timeline">'
        '<div class="timeline-start-marker" aria-hidden="true"></div>'
        '<div class="timeline-item">'
        '<div class="timeline-marker" aria-hidden="true"></div>'
        '<div class="timeline-content">'
        '<div class="timeline-meta">'
        '<span class="timeline-date">2020</span>'
        '<span class="timeline-title">Founded</span>'
        "</div>"
        '<div class="timeline-body"><p>Started.</p></div>'
        "</div></div></div>"
    )


@pytest.mark.parametrize("show_markers", [True, False])  # type: ignore[misc]
def test_marker_counts(echo_prose: EchoProse, show_markers: bool) -> None:
    source = "2020 | A\n\n2021 | B\n\n2022 | C"
    html = _html(source, RenderConfiguration(show_markers=show_markers), echo_prose)
    expected_items = 3 if show_markers else 0
    assert html.count('class="timeline-marker"') == expected_items
    assert html.count('class="timeline-start-marker"') == (1 if show_markers else 0)


def test_title_is_escaped_and_decodes_back(echo_prose: EchoProse) -> None:
    title = "<b>\"x\"</b> & 'y'"
    html = _html(f"2020 | {title}", RenderConfiguration(), echo_prose)
    match = re.search(r'<span class="timeline-title">(.*?)</span>', html)
    assert match is not None
    inner = match.group(1)
    assert not set("<>\"'") & set(inner)
    assert unescape_html(inner) == title


def test_default_date_label_and_own_date(echo_prose: EchoProse) -> None:
    config = RenderConfiguration(default_date_label="Date")
    html = _html("Untitled moment\n\n1999 | Party", config, echo_prose)
    dates = re.findall(r'<span class="timeline-date">(.*?)</span>', html)
    assert dates == ["Date", "1999"]


def test_empty_rendered_prose_drops_body() -> None:
    class SilentProse:
        async def __call__(self, text: str, target: Node, source_path: str) -> None:
            target.append_markup("  \n ")

    html = _html("2020 | A\nsomething", RenderConfiguration(), SilentProse())
    assert "timeline-body" not in html


def test_rendered_prose_is_trimmed() -> None:
    class PaddedProse:
        async def __call__(self, text: str, target: Node, source_path: str) -> None:
            target.append_markup(f"\n<p>{text}</p>\n")

    html = _html("2020 | A\nbody", RenderConfiguration(), PaddedProse())
    assert '<div class="timeline-body"><p>body</p></div>' in html


def test_prose_failure_aborts_render() -> None:
    with pytest.raises(RuntimeError):
        _html("2020 | A\nbody", RenderConfiguration(), FailingProse())


@pytest.mark.parametrize(  # type: ignore[misc]
    "config",
    [
        RenderConfiguration(),
        RenderConfiguration(show_markers=False, default_date_label=""),
        RenderConfiguration(default_date_label="When?"),
    ],
)
def test_live_and_static_outputs_match(echo_prose: EchoProse, config: RenderConfiguration) -> None:
    """Both renderers produce byte-identical HTML for trimmed prose output."""
    source = (
        "2020 | <Founded> & co\nFirst *steps*.\n\n"
        "Undated note\n\n"
        "- bullet only\n- second\n\n"
        "2022 - \"Quoted\" 'title'"
    )
    entries: list[TimelineEntry] = parse_timeline_source(source)

    live = Node(classes=["timeline"])
    asyncio.run(render_timeline_entries(entries, live, "p.md", config, echo_prose))
    static = asyncio.run(render_timeline_document(entries, config, "p.md", echo_prose))

    assert live.outer_html() == static
