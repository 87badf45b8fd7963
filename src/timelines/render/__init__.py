"""Timeline rendering: shared layout plus live (Node tree) and static (HTML) adapters."""

from __future__ import annotations

from .live import render_timeline_block, render_timeline_entries
from .markers import HIDE_MARKERS_CLASS, MarkerVisibility
from .nodes import Markup, Node
from .page import render_page
from .prose import MarkdownProseRenderer, ProseRenderer
from .sections import EMPTY_MESSAGE, layout_entries
from .static import render_entries_html, render_timeline_html

__all__ = [
    "EMPTY_MESSAGE",
    "HIDE_MARKERS_CLASS",
    "MarkdownProseRenderer",
    "MarkerVisibility",
    "Markup",
    "Node",
    "ProseRenderer",
    "layout_entries",
    "render_entries_html",
    "render_page",
    "render_timeline_block",
    "render_timeline_entries",
    "render_timeline_html",
]
