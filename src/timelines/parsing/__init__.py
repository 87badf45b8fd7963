"""Text-to-structure parsing for timeline source blocks."""

from __future__ import annotations

from .header import is_likely_body_start, parse_header
from .segmenter import parse_timeline_source, split_blocks

__all__ = ["is_likely_body_start", "parse_header", "parse_timeline_source", "split_blocks"]
