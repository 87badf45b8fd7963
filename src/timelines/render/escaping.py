"""HTML escaping and tag helpers shared by the node tree and the static renderer."""

from __future__ import annotations

from collections.abc import Mapping

# Substitution order matters: `&` first so later entities are not re-escaped.
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value: str) -> str:
    """Escape the five reserved HTML characters in `value`."""
    for raw, entity in _REPLACEMENTS:
        value = value.replace(raw, entity)
    return value


def unescape_html(value: str) -> str:
    """Reverse :func:`escape_html` exactly."""
    for raw, entity in reversed(_REPLACEMENTS):
        value = value.replace(entity, raw)
    return value


def open_tag(
    tag: str,
    classes: list[str] | tuple[str, ...] = (),
    attrs: Mapping[str, str] | None = None,
) -> str:
    """Render an opening tag; `class` always comes first, then `attrs` in order."""
    parts = [tag]
    if classes:
        parts.append(f'class="{escape_html(" ".join(classes))}"')
    for name, value in (attrs or {}).items():
        parts.append(f'{name}="{escape_html(value)}"')
    return f"<{' '.join(parts)}>"


__all__ = ["escape_html", "open_tag", "unescape_html"]
