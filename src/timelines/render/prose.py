"""Prose rendering: turn an entry's Markdown body into HTML inside a `Node`.

Renderers never format prose themselves; they await an injected
:class:`ProseRenderer`:

    await prose(text, target_node, source_path)

The call is async so a host can plug in renderers that do I/O (embeds,
remote previews). Any exception it raises propagates out of the timeline
render unchanged.

Default implementation
----------------------
:class:`MarkdownProseRenderer` uses markdown-it-py (CommonMark preset plus
tables and strikethrough). Relative link and image targets are rewritten
against the directory of `source_path`, so ``[design](../design.md)`` written in
``notes/2024/plan.md`` points to ``notes/design.md``. Absolute URLs,
root-relative paths, in-page anchors and ``mailto:`` links are left alone.
"""

from __future__ import annotations

import posixpath
from typing import Protocol
from urllib.parse import urlsplit, urlunsplit

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from .nodes import Node


class ProseRenderer(Protocol):
    """Async callable rendering Markdown `text` into `target`."""

    async def __call__(self, text: str, target: Node, source_path: str) -> None: ...


def _is_relative(target: str) -> bool:
    if not target or target.startswith(("/", "#")):
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc


def resolve_relative(base_dir: str, target: str) -> str:
    """Resolve a relative URL `target` against the POSIX directory `base_dir`."""
    if not base_dir or not _is_relative(target):
        return target
    parts = urlsplit(target)
    path = parts.path
    if path:
        path = posixpath.normpath(posixpath.join(base_dir, path))
    return urlunsplit(("", "", path, parts.query, parts.fragment))


def _resolve_links_rule(state: StateCore) -> None:
    base_dir = state.env.get("base_dir", "") if isinstance(state.env, dict) else ""
    if not base_dir:
        return
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if child.type == "link_open":
                attr = "href"
            elif child.type == "image":
                attr = "src"
            else:
                continue
            value = child.attrGet(attr)
            if isinstance(value, str):
                child.attrSet(attr, resolve_relative(base_dir, value))


def build_markdown(*, allow_html: bool = True) -> MarkdownIt:
    """Return the MarkdownIt instance used for entry bodies."""
    md = MarkdownIt("commonmark", {"html": allow_html}).enable(["table", "strikethrough"])
    md.core.ruler.push("resolve_relative_links", _resolve_links_rule)
    return md


class MarkdownProseRenderer:
    """Render Markdown with markdown-it-py and append the HTML to the target node."""

    def __init__(self, md: MarkdownIt | None = None) -> None:
        self._md = md if md is not None else build_markdown()

    async def __call__(self, text: str, target: Node, source_path: str) -> None:
        env = {"base_dir": posixpath.dirname(source_path.replace("\\", "/"))}
        target.append_markup(self._md.render(text, env))


__all__ = ["MarkdownProseRenderer", "ProseRenderer", "build_markdown", "resolve_relative"]
