"""Static renderer: build a self-contained HTML string for export.

Mirrors :mod:`timelines.render.live` section for section. Date and title
text is escaped with :func:`escape_html`; prose is rendered into a scratch
`Node`, serialized and trimmed before embedding, and an empty result drops
the body block.
"""

from __future__ import annotations

from collections.abc import Sequence

from timelines.core.contracts.config import RenderConfiguration
from timelines.core.contracts.entry import TimelineEntry
from timelines.core.settings import get_logger
from timelines.parsing.segmenter import parse_timeline_source

from .escaping import escape_html, open_tag
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

_MARKER_HTML = f"{open_tag('div', [CLS_MARKER], MARKER_ATTRS)}</div>"
_START_MARKER_HTML = f"{open_tag('div', [CLS_START_MARKER], MARKER_ATTRS)}</div>"


def _wrap(tag: str, cls: str, inner: str) -> str:
    return f"{open_tag(tag, [cls])}{inner}</{tag}>"


async def _render_prose_html(prose: ProseRenderer, text: str, source_path: str) -> str:
    host = Node()
    await prose(text, host, source_path)
    return host.inner_html().strip()


async def render_entries_html(
    entries: Sequence[TimelineEntry],
    source_path: str,
    config: RenderConfiguration,
    prose: ProseRenderer,
) -> str:
    """Render `entries` to the inner HTML of a ``.timeline`` container."""
    layout = layout_entries(entries, config)
    if layout.empty:
        return _wrap("div", CLS_EMPTY, escape_html(EMPTY_MESSAGE))

    parts: list[str] = []
    if layout.start_marker:
        parts.append(_START_MARKER_HTML)

    for item in layout.items:
        parts.append(open_tag("div", [CLS_ITEM]))
        if item.marker:
            parts.append(_MARKER_HTML)
        parts.append(open_tag("div", [CLS_CONTENT]))

        if item.meta is not None:
            meta = ""
            if item.meta.date:
                meta += _wrap("span", CLS_DATE, escape_html(item.meta.date))
            if item.meta.title:
                meta += _wrap("span", CLS_TITLE, escape_html(item.meta.title))
            parts.append(_wrap("div", CLS_META, meta))

        if item.body is not None:
            body_html = await _render_prose_html(prose, item.body, source_path)
            if body_html:
                parts.append(_wrap("div", CLS_BODY, body_html))

        parts.append("</div></div>")

    log.debug("Rendered %d static timeline item(s) for %s", len(layout.items), source_path)
    return "".join(parts)


async def render_timeline_document(
    entries: Sequence[TimelineEntry],
    config: RenderConfiguration,
    source_path: str,
    prose: ProseRenderer,
) -> str:
    """Render `entries` wrapped in the outer ``<div class="timeline">``."""
    inner = await render_entries_html(entries, source_path, config, prose)
    return _wrap("div", CLS_TIMELINE, inner)


async def render_timeline_html(
    source: str,
    config: RenderConfiguration,
    source_path: str,
    prose: ProseRenderer,
) -> str:
    """Parse `source` and return the complete ``<div class="timeline">`` markup."""
    entries = parse_timeline_source(source)
    return await render_timeline_document(entries, config, source_path, prose)


__all__ = ["render_entries_html", "render_timeline_document", "render_timeline_html"]
