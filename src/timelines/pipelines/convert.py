"""Batch conversion: replace every ```` ```timeline ```` block with static HTML.

Flow Overview
-------------
1. Scan the document for fenced blocks opened by ```` ```timeline ```` and
   closed by a line starting with ```` ``` ````.
2. Render each block's source with the static renderer, in document order.
3. Splice the HTML in place of the whole fence (fence lines included).
4. Report how many blocks were converted. Zero blocks is an informational
   outcome: the content is returned unchanged and no file is written.

A prose-render failure aborts the whole conversion; nothing is written.

Usage
-----
>>> report = asyncio.run(convert_timeline_file(Path("notes/history.md")))
>>> report.message
'Converted 2 timeline block(s) to HTML.'
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field

from timelines.core.config_store import ConfigStore
from timelines.core.contracts.config import RenderConfiguration
from timelines.core.settings import get_logger
from timelines.render.prose import MarkdownProseRenderer, ProseRenderer
from timelines.render.static import render_timeline_html

log = get_logger("timelines.convert")

TIMELINE_BLOCK_PATTERN = re.compile(r"```timeline\s*\n(.*?)\n```", re.DOTALL)

NO_BLOCKS_MESSAGE = "No timeline code blocks found in this file."


class ConversionReport(BaseModel):
    """Outcome of converting one document."""

    converted: int = Field(ge=0, description="Number of timeline blocks replaced.")
    content: str = Field(description="Document text after conversion (unchanged if none).")
    written: bool = Field(default=False, description="True when the file on disk was updated.")

    @property
    def changed(self) -> bool:
        return self.converted > 0

    @property
    def message(self) -> str:
        """User-facing summary of the conversion."""
        if not self.changed:
            return NO_BLOCKS_MESSAGE
        return f"Converted {self.converted} timeline block(s) to HTML."


async def convert_timeline_blocks(
    content: str,
    config: RenderConfiguration,
    source_path: str,
    prose: ProseRenderer,
) -> ConversionReport:
    """Return `content` with every timeline block replaced by its HTML rendering."""
    output: list[str] = []
    last_index = 0
    converted = 0

    for match in TIMELINE_BLOCK_PATTERN.finditer(content):
        output.append(content[last_index : match.start()])
        html = await render_timeline_html(match.group(1) or "", config, source_path, prose)
        output.append(html)
        last_index = match.end()
        converted += 1

    if converted == 0:
        log.info("%s: %s", source_path, NO_BLOCKS_MESSAGE)
        return ConversionReport(converted=0, content=content)

    output.append(content[last_index:])
    log.info("%s: converted %d timeline block(s)", source_path, converted)
    return ConversionReport(converted=converted, content="".join(output))


async def convert_timeline_file(
    path: Path,
    config: RenderConfiguration | None = None,
    prose: ProseRenderer | None = None,
    *,
    dry_run: bool = False,
) -> ConversionReport:
    """Convert the timeline blocks of the Markdown file at `path` in place.

    Parameters
    ----------
    path:
        Markdown document to rewrite.
    config:
        Render options; defaults to the persisted configuration.
    prose:
        Prose renderer; defaults to :class:`MarkdownProseRenderer`.
    dry_run:
        When True, compute the report but never write the file.
    """
    config = config if config is not None else ConfigStore().load()
    prose = prose if prose is not None else MarkdownProseRenderer()

    content = path.read_text(encoding="utf-8")
    report = await convert_timeline_blocks(content, config, path.as_posix(), prose)

    if report.changed and not dry_run:
        path.write_text(report.content, encoding="utf-8")
        report = report.model_copy(update={"written": True})
    return report


__all__ = [
    "NO_BLOCKS_MESSAGE",
    "TIMELINE_BLOCK_PATTERN",
    "ConversionReport",
    "convert_timeline_blocks",
    "convert_timeline_file",
]
