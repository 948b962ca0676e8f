"""
Utility functions for termclip.

Provides helpers for:
- Display width measurement
- Count and width based truncation
- Logging setup
"""

from .display_width import char_width, text_width
from .log import setup_logging
from .string_helpers import DEFAULT_ELLIPSIS, truncate_by_count, truncate_by_width

__all__ = [
    "DEFAULT_ELLIPSIS",
    "char_width",
    "setup_logging",
    "text_width",
    "truncate_by_count",
    "truncate_by_width",
]
