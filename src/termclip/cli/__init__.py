"""CLI module for text truncation.

Provides command-line interface for:
- Truncating text by character count
- Truncating text by display width
- Measuring text
"""

from termclip.cli.main import cli

__all__ = ["cli"]
