"""Comparison functions for text strings, with and without case folding."""

from __future__ import annotations

__all__ = [
    "string_equal",
    "string_compare",
    "string_nocase_equal",
    "string_nocase_compare",
]


def _ascii_lower(char: str) -> str:
    """Lower-case a single character only if it is an ASCII letter."""
    if "A" <= char <= "Z":
        return chr(ord(char) + 32)
    return char


def _sign(difference: int) -> int:
    if difference < 0:
        return -1
    if difference > 0:
        return 1
    return 0


def string_equal(string1: str, string2: str) -> bool:
    """Return True if the two strings are identical."""
    return string1 == string2


def string_compare(string1: str, string2: str) -> int:
    """Compare two strings: -1 if the first sorts first, 1 if after, 0 if equal."""
    if string1 < string2:
        return -1
    if string1 > string2:
        return 1
    return 0


def string_nocase_equal(string1: str, string2: str) -> bool:
    """Return True if the strings are equal, ignoring the case of ASCII letters."""
    return string_nocase_compare(string1, string2) == 0


def string_nocase_compare(string1: str, string2: str) -> int:
    """Compare two strings ignoring the case of ASCII letters.

    Returns -1, 0 or 1.  A string that is a prefix of the other sorts first.
    """
    for char1, char2 in zip(string1, string2):
        c1 = ord(_ascii_lower(char1))
        c2 = ord(_ascii_lower(char2))
        if c1 != c2:
            return -1 if c1 < c2 else 1
    return _sign(len(string1) - len(string2))