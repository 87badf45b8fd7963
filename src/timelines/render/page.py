"""Standalone HTML page wrapper for rendered timelines.

The stylesheet draws the vertical rail and the circular markers, and hides
markers whenever the body carries ``timeline-hide-markers``.
"""

from __future__ import annotations

from .escaping import escape_html, open_tag
from .markers import HIDE_MARKERS_CLASS
from .nodes import Node

TIMELINE_CSS = f"""
.timeline {{ position: relative; margin: 1em 0; padding-left: 1.75em; }}
.timeline::before {{
  content: ""; position: absolute; left: 0.45em; top: 0.5em; bottom: 0.5em;
  width: 2px; background: #c7c7c7;
}}
.timeline-start-marker {{
  position: absolute; left: 0.2em; top: 0; width: 0.6em; height: 0.6em;
  border-radius: 50%; border: 2px solid #7a7a7a; background: #fff;
}}
.timeline-item {{ position: relative; margin: 0 0 1.25em 0; }}
.timeline-marker {{
  position: absolute; left: -1.55em; top: 0.35em; width: 0.7em; height: 0.7em;
  border-radius: 50%; background: #4a7dbd;
}}
.timeline-meta {{ display: flex; gap: 0.6em; align-items: baseline; }}
.timeline-date {{ font-size: 0.85em; color: #666; white-space: nowrap; }}
.timeline-title {{ font-weight: 600; }}
.timeline-body > :first-child {{ margin-top: 0.25em; }}
.timeline-body > :last-child {{ margin-bottom: 0; }}
.timeline-empty {{ color: #888; font-style: italic; }}
.{HIDE_MARKERS_CLASS} .timeline-marker,
.{HIDE_MARKERS_CLASS} .timeline-start-marker {{ display: none; }}
""".strip()


def render_page(timeline_html: str, body: Node | None = None, *, title: str = "Timeline") -> str:
    """Return a complete HTML document embedding `timeline_html`.

    `body` supplies the classes of the document body (for example the marker
    visibility class); its children are not serialized.
    """
    body_classes = body.classes if body is not None else []
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape_html(title)}</title>\n"
        f"<style>\n{TIMELINE_CSS}\n</style>\n"
        "</head>\n"
        f"{open_tag('body', body_classes)}\n"
        f"{timeline_html}\n"
        "</body>\n"
        "</html>\n"
    )


__all__ = ["TIMELINE_CSS", "render_page"]
