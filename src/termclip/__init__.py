"""
termclip: Display-safe string truncation for terminal output.

Truncate by character count:
    from termclip import truncate_by_count

    truncate_by_count("hello world", 5)        # 'hello...'

Truncate by display width (wide characters count as two columns):
    from termclip import truncate_by_width

    truncate_by_width("你好世界", 7)           # '你好...'
    truncate_by_width("hello world", 8, "→")   # 'hello w→'

Neither function splits a character, and width truncation never returns
text wider than the requested budget, even when the ellipsis itself has
to be shortened.
"""

__version__ = "0.1.0"

from .config import Config, get_config
from .utils import (
    DEFAULT_ELLIPSIS,
    char_width,
    setup_logging,
    text_width,
    truncate_by_count,
    truncate_by_width,
)

__all__ = [
    # Version
    "__version__",
    # Truncation
    "DEFAULT_ELLIPSIS",
    "truncate_by_count",
    "truncate_by_width",
    # Width
    "char_width",
    "text_width",
    # Config
    "Config",
    "get_config",
    # Utils
    "setup_logging",
]
