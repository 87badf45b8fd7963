"""Block segmenter: split timeline source text into `TimelineEntry` objects.

Algorithm
---------
1) Normalize line endings and trim; empty source yields ``[]``.
2) Split on runs of two or more newlines. Each non-empty, trimmed chunk is a
   *block*; block order becomes entry order.
3) The first line of a block is the header candidate; the remaining lines,
   rejoined and trimmed, are the body.
4) A header that looks like Markdown body content (see
   :func:`is_likely_body_start`) means the whole block is body.
5) A header yielding neither date nor title, with an empty body, also falls
   back to the whole block as body so no text is lost.

Parsing is total: any string produces a (possibly empty) list.

Examples
--------
>>> [e.title for e in parse_timeline_source("2020 | A\\n\\n2021 | B")]
['A', 'B']
"""

from __future__ import annotations

import re

from timelines.core.contracts.entry import TimelineEntry
from timelines.core.settings import get_logger

from .header import is_likely_body_start, parse_header

log = get_logger("timelines.parsing")

_BLOCK_BREAK = re.compile(r"\n{2,}")


def split_blocks(source: str) -> list[str]:
    """Split `source` into trimmed, non-empty blank-line-separated blocks."""
    text = source.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return []
    blocks = (block.strip() for block in _BLOCK_BREAK.split(text))
    return [block for block in blocks if block]


def _entry_from_block(block: str) -> TimelineEntry:
    header_line, _, rest = block.partition("\n")
    header_line = header_line.strip()
    body = rest.strip()

    if is_likely_body_start(header_line):
        return TimelineEntry(body=block)

    header = parse_header(header_line)
    if header.is_empty and not body:
        return TimelineEntry(body=block)

    return TimelineEntry(date=header.date, title=header.title, body=body)


def parse_timeline_source(source: str) -> list[TimelineEntry]:
    """Parse timeline source text into an ordered list of entries."""
    entries = [_entry_from_block(block) for block in split_blocks(source)]
    log.debug("parse_timeline_source: %d entries", len(entries))
    return entries


__all__ = ["parse_timeline_source", "split_blocks"]
