"""Entry-to-section decomposition shared by the live and static renderers.

Both renderers walk the same :class:`TimelineLayout`, so the inclusion rules
below live in exactly one place:

- no entries            -> only the "empty" indicator;
- ``show_markers``      -> a leading start marker and one marker per item;
- meta block            -> only when a date resolves or a title exists;
- date resolution       -> entry date, else trimmed default label, else none;
- body block            -> only when the trimmed body is non-empty.

Class names are the public vocabulary of the rendered output and are
exported as constants so tests and stylesheets do not repeat literals.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from timelines.core.contracts.config import RenderConfiguration
from timelines.core.contracts.entry import TimelineEntry

EMPTY_MESSAGE = "No timeline entries found."

CLS_TIMELINE = "timeline"
CLS_EMPTY = "timeline-empty"
CLS_START_MARKER = "timeline-start-marker"
CLS_ITEM = "timeline-item"
CLS_MARKER = "timeline-marker"
CLS_CONTENT = "timeline-content"
CLS_META = "timeline-meta"
CLS_DATE = "timeline-date"
CLS_TITLE = "timeline-title"
CLS_BODY = "timeline-body"

MARKER_ATTRS: dict[str, str] = {"aria-hidden": "true"}


@dataclass(frozen=True)
class MetaSection:
    """Date and title shown above an entry's body."""

    date: str | None
    title: str | None


@dataclass(frozen=True)
class ItemSection:
    """Everything one timeline item renders, in order."""

    marker: bool
    meta: MetaSection | None
    body: str | None


@dataclass(frozen=True)
class TimelineLayout:
    """The full render plan for one entry sequence."""

    empty: bool
    start_marker: bool
    items: tuple[ItemSection, ...]


def resolve_date(entry: TimelineEntry, config: RenderConfiguration) -> str | None:
    """Return the date to display for `entry`, falling back to the default label."""
    return entry.date or config.fallback_date


def build_item(entry: TimelineEntry, config: RenderConfiguration) -> ItemSection:
    date = resolve_date(entry, config)
    title = entry.title or None
    meta = MetaSection(date=date, title=title) if (date or title) else None
    body = entry.body.strip() or None
    return ItemSection(marker=config.show_markers, meta=meta, body=body)


def layout_entries(
    entries: Sequence[TimelineEntry], config: RenderConfiguration
) -> TimelineLayout:
    """Decompose `entries` into the sections both renderers emit."""
    if not entries:
        return TimelineLayout(empty=True, start_marker=False, items=())
    return TimelineLayout(
        empty=False,
        start_marker=config.show_markers,
        items=tuple(build_item(entry, config) for entry in entries),
    )


__all__ = [
    "CLS_BODY",
    "CLS_CONTENT",
    "CLS_DATE",
    "CLS_EMPTY",
    "CLS_ITEM",
    "CLS_MARKER",
    "CLS_META",
    "CLS_START_MARKER",
    "CLS_TIMELINE",
    "CLS_TITLE",
    "EMPTY_MESSAGE",
    "ItemSection",
    "MARKER_ATTRS",
    "MetaSection",
    "TimelineLayout",
    "build_item",
    "layout_entries",
    "resolve_date",
]
