# scripts/smoke.py
"""
Smoke Test Script for the TimeLines renderers.

Usage
-----
1. Render the built-in sample:
    $ python scripts/smoke.py

2. Render a local timeline source file:
    $ python scripts/smoke.py --file samples/history.txt --no-markers
"""

import argparse
import asyncio
import logging
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv

from timelines.core.contracts.config import RenderConfiguration
from timelines.parsing.segmenter import parse_timeline_source
from timelines.render.live import render_timeline_entries
from timelines.render.nodes import Node
from timelines.render.prose import MarkdownProseRenderer
from timelines.render.static import render_timeline_document

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_TEXT = """
2019 | Project kickoff
First sketches of the **renderer**, see [notes](../notes/kickoff.md).

2020-03 - Public beta
- invite only
- feedback form

Undated retrospective
Lessons learned, written later.

- a stray list with no header
"""


async def _run(source: str, config: RenderConfiguration, source_path: str) -> None:
    prose = MarkdownProseRenderer()
    entries = parse_timeline_source(source)
    print(f"\n📋 Parsed {len(entries)} entries:")
    for i, entry in enumerate(entries, start=1):
        print(f"   {i:02d}. date={entry.date!r} title={entry.title!r} body={len(entry.body)} chars")

    live = Node(classes=["timeline"])
    await render_timeline_entries(entries, live, source_path, config, prose)
    static = await render_timeline_document(entries, config, source_path, prose)

    print("\n🌳 Live tree (serialized):")
    print(live.outer_html())
    print("\n📄 Static markup:")
    print(static)


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run TimeLines Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a timeline source file")
    parser.add_argument("--no-markers", action="store_true", help="Disable marker output")
    args = parser.parse_args()

    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            return
        print(f"\n📂 Using input file: {input_path}")
        source, source_path = input_path.read_text(encoding="utf-8"), input_path.as_posix()
    else:
        print("\n📝 Using default sample (No --file provided)")
        source, source_path = DEFAULT_TEXT, "journal/project.md"

    config = RenderConfiguration(show_markers=not args.no_markers)
    try:
        asyncio.run(_run(source, config, source_path))
    except Exception:
        print("\n❌ Smoke test failed:")
        traceback.print_exc()
        sys.exit(1)

    print("\n✅ Smoke test complete.")


if __name__ == "__main__":
    main()
