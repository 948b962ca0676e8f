"""
Terminal display width helpers.

Measures how many terminal columns text occupies, using the
East Asian Width tables shipped with wcwidth.
"""

from wcwidth import wcwidth


def char_width(char: str) -> int:
    """
    Return the column width of a single code point.

    Args:
        char: A one-character string

    Returns:
        0 for combining, zero-width and non-printable characters,
        2 for wide and fullwidth characters, 1 otherwise

    Examples:
        >>> char_width("a")
        1
        >>> char_width("你")
        2
        >>> char_width("\\u0301")
        0
    """
    # wcwidth reports -1 for control characters
    return max(wcwidth(char), 0)


def text_width(text: str) -> int:
    """
    Return the total column width of a string.

    The width is the sum of the per-character widths; combining marks
    are not clustered with their base character.

    Examples:
        >>> text_width("hello")
        5
        >>> text_width("你好")
        4
        >>> text_width("")
        0
    """
    return sum(char_width(c) for c in text)
