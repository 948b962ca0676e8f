"""Main CLI entry point for termclip.

Usage:
    termclip --help
    termclip count "hello world" -n 5
    termclip width "你好世界" -w 7 -e "…"
    cat names.txt | termclip measure
"""

import click

from termclip.cli.commands import count, measure, width
from termclip.utils import setup_logging


@click.group()
@click.version_option(package_name="termclip")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: TERMCLIP_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """Display-safe text truncation.

    Shortens text without splitting characters or overflowing the
    terminal when wide characters are involved.

    Commands:
        count    - Truncate to a number of characters
        width    - Truncate to a display width
        measure  - Show character count and display width
    """
    setup_logging(log_level)


cli.add_command(count)
cli.add_command(width)
cli.add_command(measure)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
