"""String helpers: wide-character detection, byte-weighted length and trimming."""

from __future__ import annotations

import re

_WIDE_CHAR = re.compile(r"[^\x00-\xff]")


def include_double_byte(text: str) -> bool:
    """Return True if any character lies outside the single-byte range (0x00-0xFF)."""
    return _WIDE_CHAR.search(text) is not None


def length(text: str, bytes_each_wide: int = 2) -> int:
    """
    Measure text counting wide characters as bytes_each_wide units.

    Examples:
        >>> length("abc")
        3
        >>> length("中文ab")
        6
        >>> length("中文ab", bytes_each_wide=3)
        8
    """
    return sum(bytes_each_wide if ord(c) > 0xFF else 1 for c in text)


def trim(text: str, char: str | None = None, direction: str | None = None, *, escape: bool = False) -> str:
    """
    Strip runs of char from the start, the end, or both ends of text.

    Args:
        text: String to trim
        char: Regex fragment to strip (default whitespace). Inserted as-is, so
            metacharacters must be escaped by the caller unless escape=True
        direction: "l" for the start only, "r" for the end only, anything else for both
        escape: Escape char with re.escape before building the pattern

    Returns:
        Trimmed string

    Examples:
        >>> trim("  hello  ")
        'hello'
        >>> trim("--a-b--", "-", "l")
        'a-b--'
        >>> trim("..a..", ".", escape=True)
        'a'
    """
    if not char:
        char = r"\s"
    elif escape:
        char = re.escape(char)

    # Group the fragment so "+" applies to the whole of it
    unit = f"(?:{char})"
    match direction:
        case "l":
            pattern = rf"^{unit}+"
        case "r":
            pattern = rf"{unit}+\Z"
        case _:
            pattern = rf"^{unit}+|{unit}+\Z"
    return re.sub(pattern, "", text)


def uppercase_first_letter(text: str) -> str:
    """
    Uppercase the first character and leave the rest untouched.

    Examples:
        >>> uppercase_first_letter("lucy")
        'Lucy'
        >>> uppercase_first_letter("mcDonald")
        'McDonald'
    """
    return text[:1].upper() + text[1:]
