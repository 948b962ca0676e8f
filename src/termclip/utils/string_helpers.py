"""
String truncation utilities.

Provides helpers for shortening text to a character budget or to a
terminal column budget without splitting characters.
"""

import logging

from .display_width import char_width, text_width

logger = logging.getLogger(__name__)

DEFAULT_ELLIPSIS = "..."


def truncate_by_count(text: str, max_chars: int) -> str:
    """
    Truncate a string to at most max_chars characters, adding '...' if needed.

    Characters are code points, so emoji and CJK text are never cut in
    half. Trailing whitespace is stripped from the kept prefix before the
    ellipsis is appended.

    Args:
        text: The string to truncate
        max_chars: Maximum number of characters to keep (excluding '...')

    Returns:
        The original string if it has at most max_chars characters,
        otherwise the stripped prefix followed by '...'

    Raises:
        ValueError: If max_chars is negative

    Examples:
        >>> truncate_by_count("hello", 10)
        'hello'
        >>> truncate_by_count("hello world", 5)
        'hello...'
        >>> truncate_by_count("hello", 0)
        '...'
        >>> truncate_by_count("😀😀😀😀", 2)
        '😀😀...'
    """
    if max_chars < 0:
        raise ValueError(f"max_chars must be non-negative, got {max_chars}")

    # Returned untouched, no stripping on this path
    if len(text) <= max_chars:
        return text

    return text[:max_chars].rstrip() + DEFAULT_ELLIPSIS


def _fit_prefix(text: str, max_width: int) -> int:
    """Return the index just past the longest prefix of text within max_width columns."""
    width_so_far = 0
    cut = 0
    for char in text:
        w = char_width(char)
        if width_so_far + w > max_width:
            break
        width_so_far += w
        cut += 1
    return cut


def truncate_by_width(text: str, max_width: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """
    Truncate a string to fit within a terminal display width.

    Wide characters (CJK, most emoji) count as two columns, combining
    marks as zero. If the ellipsis is at least as wide as max_width it is
    itself shortened to fit, so the result never exceeds max_width.

    Args:
        text: The string to truncate
        max_width: Maximum terminal display width of the result
        ellipsis: Marker appended when truncation happens (default: '...')

    Returns:
        The original string if it fits, '' if max_width is 0, otherwise
        the stripped prefix that fits followed by the (possibly
        shortened) ellipsis

    Raises:
        ValueError: If max_width is negative

    Examples:
        >>> truncate_by_width("hello world", 8)
        'hello...'
        >>> truncate_by_width("hello world", 8, "→")
        'hello w→'
        >>> truncate_by_width("你好世界", 7)
        '你好...'
        >>> truncate_by_width("你好世界", 1)
        '.'
        >>> truncate_by_width("你好世界", 0)
        ''
    """
    if max_width < 0:
        raise ValueError(f"max_width must be non-negative, got {max_width}")

    if max_width == 0:
        return ""

    if text_width(text) <= max_width:
        return text

    effective_ellipsis = ellipsis
    ellipsis_width = text_width(ellipsis)
    if ellipsis_width >= max_width:
        effective_ellipsis = ellipsis[:_fit_prefix(ellipsis, max_width)]
        logger.debug(
            "Ellipsis %r (width %d) shortened to %r for max_width %d",
            ellipsis,
            ellipsis_width,
            effective_ellipsis,
            max_width,
        )
        if not effective_ellipsis:
            return ""

    available = max(max_width - text_width(effective_ellipsis), 0)
    cut = _fit_prefix(text, available)

    if cut == 0:
        return effective_ellipsis

    return text[:cut].rstrip() + effective_ellipsis
