"""Small string helpers."""

from __future__ import annotations

import re

_OUTER_SPACES = re.compile(r"(^ +)|( +$)")


def compare_case_insensitive(s1: str, s2: str) -> bool:
    """Return True if both strings are equal ignoring case."""
    return s1.lower() == s2.lower()


def strip_whitespace(s: str) -> str:
    """Remove leading and trailing space characters."""
    return _OUTER_SPACES.sub("", s)


def split_into_lines(s: str) -> list[str]:
    """Split text at line breaks, keeping empty lines but not a trailing one."""
    lines = s.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def repeat_string(s: str, count: int) -> str:
    """Repeat ``s`` ``count`` times; a count below one still yields ``s`` once."""
    return s * max(count, 1)