"""Unit tests for the shared entry-to-section layout."""

from __future__ import annotations

from timelines.core.contracts.config import RenderConfiguration
from timelines.core.contracts.entry import TimelineEntry
from timelines.render.sections import MetaSection, layout_entries, resolve_date


def test_empty_layout_has_no_markers_or_items() -> None:
    layout = layout_entries([], RenderConfiguration(show_markers=True))
    assert layout.empty is True
    assert layout.start_marker is False
    assert layout.items == ()


def test_markers_follow_configuration() -> None:
    entries = [TimelineEntry(title="A"), TimelineEntry(title="B")]

    shown = layout_entries(entries, RenderConfiguration(show_markers=True))
    assert shown.start_marker is True
    assert all(item.marker for item in shown.items)

    hidden = layout_entries(entries, RenderConfiguration(show_markers=False))
    assert hidden.start_marker is False
    assert not any(item.marker for item in hidden.items)


def test_date_resolution_order() -> None:
    """Own date beats the default label; a blank default label resolves to nothing."""
    config = RenderConfiguration(default_date_label="  Undated ")
    assert resolve_date(TimelineEntry(date="1999"), config) == "1999"
    assert resolve_date(TimelineEntry(title="x"), config) == "Undated"
    assert resolve_date(TimelineEntry(title="x"), RenderConfiguration(default_date_label="  ")) is None


def test_meta_is_omitted_without_date_or_title() -> None:
    config = RenderConfiguration(default_date_label="")
    (item,) = layout_entries([TimelineEntry(body="just prose")], config).items
    assert item.meta is None
    assert item.body == "just prose"


def test_default_label_creates_meta_for_body_only_entry() -> None:
    (item,) = layout_entries([TimelineEntry(body="prose")], RenderConfiguration()).items
    assert item.meta == MetaSection(date="Date", title=None)


def test_blank_body_is_omitted() -> None:
    (item,) = layout_entries(
        [TimelineEntry(title="T", body="  \n ")], RenderConfiguration()
    ).items
    assert item.body is None
