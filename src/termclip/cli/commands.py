"""Truncation commands for CLI.

Commands for shortening text from the command line:
- count: Truncate by number of characters
- width: Truncate by terminal column width
- measure: Show character count and column width
"""

from __future__ import annotations

from collections.abc import Iterator

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from termclip.config import get_config
from termclip.utils import text_width, truncate_by_count, truncate_by_width

console = Console()


def _iter_lines(text: str | None) -> Iterator[str]:
    """Yield the TEXT argument, or each line of stdin when it is omitted."""
    if text is not None:
        yield text
        return

    for line in click.get_text_stream("stdin"):
        yield line.rstrip("\r\n")


@click.command()
@click.argument("text", required=False)
@click.option(
    "--max-chars", "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum characters to keep (default: TERMCLIP_MAX_CHARS)",
)
def count(text: str | None, max_chars: int | None) -> None:
    """Truncate TEXT to a number of characters.

    Reads lines from stdin when TEXT is omitted.

    Example:
        termclip count "hello world" -n 5
    """
    if max_chars is None:
        max_chars = get_config().max_chars

    for line in _iter_lines(text):
        click.echo(truncate_by_count(line, max_chars))


@click.command()
@click.argument("text", required=False)
@click.option(
    "--max-width", "-w",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum display width (default: TERMCLIP_MAX_WIDTH or terminal width)",
)
@click.option(
    "--ellipsis", "-e",
    default=None,
    help="Marker appended when truncated (default: TERMCLIP_ELLIPSIS)",
)
def width(text: str | None, max_width: int | None, ellipsis: str | None) -> None:
    """Truncate TEXT to a terminal display width.

    Wide characters count as two columns. Reads lines from stdin when
    TEXT is omitted.

    Example:
        termclip width "你好世界" -w 7
    """
    config = get_config()
    if max_width is None:
        max_width = config.resolve_max_width()
    if ellipsis is None:
        ellipsis = config.ellipsis

    for line in _iter_lines(text):
        click.echo(truncate_by_width(line, max_width, ellipsis))


@click.command()
@click.argument("text", required=False)
def measure(text: str | None) -> None:
    """Show the character count and display width of TEXT.

    Reads lines from stdin when TEXT is omitted.
    """
    table = Table(title="Text Measurements")
    table.add_column("Text")
    table.add_column("Chars", justify="right")
    table.add_column("Width", justify="right")

    for line in _iter_lines(text):
        table.add_row(Text(line), str(len(line)), str(text_width(line)))

    console.print(table)
