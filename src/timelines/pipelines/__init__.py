"""Pipeline entry points for TimeLines.

Currently exposed:

- :func:`convert_timeline_blocks` / :func:`convert_timeline_file`: replace
  fenced ``timeline`` blocks in a Markdown document with static HTML.
"""

from __future__ import annotations

from .convert import ConversionReport, convert_timeline_blocks, convert_timeline_file

__all__ = ["ConversionReport", "convert_timeline_blocks", "convert_timeline_file"]
