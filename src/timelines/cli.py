# src/timelines/cli.py
"""
TimeLines Command Line Interface (CLI).

This module implements the user-facing terminal interface using `typer` and `rich`.

Features
--------
- **Render**: Turn a timeline source file into static HTML, a full HTML page,
  or a Rich tree view of the live node tree.
- **Convert**: Replace every fenced ``timeline`` block in a Markdown file
  with its static HTML (the "publish" action).
- **Settings**: Show or update the persisted render configuration.

Usage
-----
    $ timelines render history.txt --format tree
    $ timelines render history.txt --no-markers -o history.html
    $ timelines convert notes/history.md --dry-run
    $ timelines settings --hide-markers --default-date-label "Undated"
"""

from __future__ import annotations

import asyncio
import traceback
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from timelines.core.config_store import ConfigStore
from timelines.core.contracts.config import RenderConfiguration
from timelines.pipelines.convert import convert_timeline_file
from timelines.render.live import render_timeline_block
from timelines.render.markers import MarkerVisibility
from timelines.render.nodes import Markup, Node
from timelines.render.page import render_page
from timelines.render.prose import MarkdownProseRenderer
from timelines.render.static import render_timeline_html

# Ensure env vars (like TIMELINES_SETTINGS_PATH) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="TimeLines: Render plain-text chronologies as timelines.",
    rich_markup_mode="markdown",
)
console = Console()


class OutputFormat(str, Enum):
    HTML = "html"
    TREE = "tree"
    PAGE = "page"


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _resolve_config(
    show_markers: bool | None, default_date_label: str | None
) -> RenderConfiguration:
    """Overlay command-line options on top of the persisted configuration."""
    config = ConfigStore().load()
    changes: dict[str, object] = {}
    if show_markers is not None:
        changes["show_markers"] = show_markers
    if default_date_label is not None:
        changes["default_date_label"] = default_date_label
    return config.model_copy(update=changes) if changes else config


def _node_label(node: Node) -> Text:
    label = Text(node.tag, style="bold")
    if node.classes:
        label.append("." + ".".join(node.classes), style="cyan")
    for name, value in node.attrs.items():
        label.append(f" {name}={value}", style="dim")
    if node.text is not None:
        label.append(f"  {node.text}", style="yellow")
    return label


def build_tree(node: Node, tree: Tree | None = None) -> Tree:
    """Convert a live `Node` tree into a Rich `Tree` for terminal display."""
    branch = Tree(_node_label(node)) if tree is None else tree.add(_node_label(node))
    for child in node.children:
        if isinstance(child, Markup):
            snippet = " ".join(child.html.split())
            branch.add(Text(f"html: {snippet}", style="green"))
        else:
            build_tree(child, branch)
    return branch


async def _render(source: str, fmt: OutputFormat, config: RenderConfiguration, path: str) -> str | Tree:
    prose = MarkdownProseRenderer()
    if fmt is OutputFormat.TREE:
        container = await render_timeline_block(source, Node("section"), path, config, prose)
        return build_tree(container)

    html = await render_timeline_html(source, config, path, prose)
    if fmt is OutputFormat.PAGE:
        body = Node("body")
        with MarkerVisibility(body, config):
            return render_page(html, body, title=Path(path).stem)
    return html


def _fail(kind: str, exc: Exception, verbose: bool) -> typer.Exit:
    console.print(f"\n[bold red]❌ {kind}:[/bold red] {escape(str(exc))}")
    if verbose:
        traceback.print_exc()
    return typer.Exit(code=1)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def render(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Timeline source text (blank-line separated entries).",
        ),
    ],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output: static html, full page, or tree view."),
    ] = OutputFormat.HTML,
    markers: Annotated[
        bool | None,
        typer.Option("--markers/--no-markers", help="Override the persisted marker setting."),
    ] = None,
    default_date_label: Annotated[
        str | None,
        typer.Option("--default-date-label", "-d", help="Fallback label for undated entries."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result to this file instead of stdout."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Render a timeline source file.

    Relative links inside entry bodies are resolved against the file's folder.
    """
    config = _resolve_config(markers, default_date_label)
    try:
        source = file.read_text(encoding="utf-8")
        result = asyncio.run(_render(source, fmt, config, file.as_posix()))
    except Exception as e:
        raise _fail("Render Error", e, verbose) from e

    if isinstance(result, Tree):
        console.print(result)
        return

    if output is not None:
        output.write_text(result, encoding="utf-8")
        console.print(
            Panel(
                f"Saved to: [link=file://{output.resolve()}]{output}[/link]",
                title="Timeline",
                border_style="green",
            )
        )
        return

    typer.echo(result)


@app.command()  # type: ignore[misc]
def convert(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            writable=True,
            help="Markdown document containing ```timeline code blocks.",
        ),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Report what would change without writing the file."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Convert every timeline code block in a Markdown file to static HTML.
    """
    try:
        report = asyncio.run(convert_timeline_file(file, dry_run=dry_run))
    except Exception as e:
        raise _fail("Conversion Error", e, verbose) from e

    if not report.changed:
        console.print(f"[yellow]ℹ️ {report.message}[/yellow]")
        return

    console.print(f"[bold green]✅ {report.message}[/bold green]")
    if dry_run:
        console.print("[dim]Dry run: file left unchanged.[/dim]")


@app.command("settings")  # type: ignore[misc]
def settings_command(
    show_markers: Annotated[
        bool | None,
        typer.Option("--show-markers/--hide-markers", help="Display the timeline markers."),
    ] = None,
    default_date_label: Annotated[
        str | None,
        typer.Option("--default-date-label", "-d", help="Fallback label for undated entries."),
    ] = None,
) -> None:
    """
    Show the persisted render settings, updating them first if options are given.
    """
    store = ConfigStore()
    if show_markers is None and default_date_label is None:
        config = store.load()
    else:
        config = store.update(show_markers=show_markers, default_date_label=default_date_label)

    table = Table(title="Timeline settings", show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Show markers", "yes" if config.show_markers else "no")
    table.add_row("Default date label", escape(config.default_date_label) or "[dim](none)[/dim]")
    console.print(table)
    console.print(f"[dim]Stored in: {escape(str(store.path))}[/dim]")


if __name__ == "__main__":
    app()
