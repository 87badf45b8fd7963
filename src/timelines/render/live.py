"""Live renderer: build the interactive timeline `Node` tree.

This is the adapter that maps a :class:`TimelineLayout` onto `Node`
children. Entries are rendered strictly one after another: each body's prose
render is awaited before the next item is created, so output order always
matches entry order.

API
---
- `render_timeline_entries(entries, container, source_path, config, prose)`
    Fill `container` with items; returns the container.
- `render_timeline_block(source, el, source_path, config, prose)`
    Parse source text, create the outer ``.timeline`` div inside `el` and
    render into it (what a Markdown code-block processor does).
"""

from __future__ import annotations

from collections.abc import Sequence

from timelines.core.contracts.config import RenderConfiguration
from timelines.core.contracts.entry import TimelineEntry
from timelines.core.settings import get_logger
from timelines.parsing.segmenter import parse_timeline_source

from .nodes import Node
from .prose import ProseRenderer
from .sections import (
    CLS_BODY,
    CLS_CONTENT,
    CLS_DATE,
    CLS_EMPTY,
    CLS_ITEM,
    CLS_MARKER,
    CLS_META,
    CLS_START_MARKER,
    CLS_TIMELINE,
    CLS_TITLE,
    EMPTY_MESSAGE,
    MARKER_ATTRS,
    layout_entries,
)

log = get_logger("timelines.render")


async def render_timeline_entries(
    entries: Sequence[TimelineEntry],
    container: Node,
    source_path: str,
    config: RenderConfiguration,
    prose: ProseRenderer,
) -> Node:
    """Render `entries` as children of `container`."""
    layout = layout_entries(entries, config)
    if layout.empty:
        container.create_div(cls=CLS_EMPTY).set_text(EMPTY_MESSAGE)
        return container

    if layout.start_marker:
        container.create_div(cls=CLS_START_MARKER, attrs=MARKER_ATTRS)

    for item in layout.items:
        item_el = container.create_div(cls=CLS_ITEM)
        if item.marker:
            item_el.create_div(cls=CLS_MARKER, attrs=MARKER_ATTRS)
        content = item_el.create_div(cls=CLS_CONTENT)

        if item.meta is not None:
            meta = content.create_div(cls=CLS_META)
            if item.meta.date:
                meta.create_span(cls=CLS_DATE).set_text(item.meta.date)
            if item.meta.title:
                meta.create_span(cls=CLS_TITLE).set_text(item.meta.title)

        if item.body is not None:
            body_el = content.create_div(cls=CLS_BODY)
            await prose(item.body, body_el, source_path)

    log.debug("Rendered %d live timeline item(s) for %s", len(layout.items), source_path)
    return container


async def render_timeline_block(
    source: str,
    el: Node,
    source_path: str,
    config: RenderConfiguration,
    prose: ProseRenderer,
) -> Node:
    """Parse `source` and render it into a new ``.timeline`` div inside `el`."""
    entries = parse_timeline_source(source)
    container = el.create_div(cls=CLS_TIMELINE)
    return await render_timeline_entries(entries, container, source_path, config, prose)


__all__ = ["render_timeline_block", "render_timeline_entries"]
