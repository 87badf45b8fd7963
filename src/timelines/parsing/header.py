"""Header line detection and date/title splitting.

The first line of every block is a *candidate* header. Two questions are
answered here:

1) Is the line obviously Markdown body content (list item, quote, code
   fence, blank)? Then the block has no header at all.
2) Otherwise, how does it split into a date and a title?

Splitting strategies, strongest signal first
--------------------------------------------
1. ``"2024-01-01 | Launch"``  : first pipe separates date and title; any
   further pipes stay in the title.
2. ``"2024-01-01 - Launch"``  : space-hyphen-space separates them; a plain
   hyphen inside a word (``"Re-launch"``) is not a separator.
3. ``"Launch"``               : the whole line is the title, no date.

Blank pieces come back as ``None``, never as empty strings.

Examples
--------
>>> parse_header("Q3 2024 | Beta | invite only")
HeaderParts(date='Q3 2024', title='Beta | invite only')
>>> is_likely_body_start("- first bullet")
True
"""

from __future__ import annotations

import re

from timelines.core.contracts.entry import HeaderParts

_BODY_START = re.compile(r"^(```|>\s+|[-*+]\s+|\d+\.)")

PIPE_SEPARATOR = "|"
DASH_SEPARATOR = " - "


def is_likely_body_start(line: str) -> bool:
    """Return True if `line` opens Markdown body content rather than a header."""
    trimmed = line.strip()
    if not trimmed:
        return True
    return _BODY_START.match(trimmed) is not None


def _split_on(line: str, separator: str) -> HeaderParts | None:
    parts = line.split(separator)
    if len(parts) < 2:
        return None
    date = parts[0].strip()
    title = separator.join(parts[1:]).strip()
    return HeaderParts(date=date or None, title=title or None)


def parse_header(line: str) -> HeaderParts:
    """Split a header line into its date and title parts."""
    for separator in (PIPE_SEPARATOR, DASH_SEPARATOR):
        parts = _split_on(line, separator)
        if parts is not None:
            return parts

    header = line.strip()
    return HeaderParts(title=header or None)


__all__ = ["DASH_SEPARATOR", "PIPE_SEPARATOR", "is_likely_body_start", "parse_header"]
