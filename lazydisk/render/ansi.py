"""ANSI and display-width helpers for the frame renderer."""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ANSI_RESET = "\x1b[0m"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def truncate_to_width(text: str, max_cols: int, ellipsis: str = "…") -> str:
    """Shorten ``text`` to ``max_cols`` display columns, marking the cut with ``ellipsis``."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    budget = max_cols - display_width(ellipsis)
    if budget <= 0:
        return ellipsis[:max_cols]
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + ellipsis


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


__all__ = [
    "ANSI_ESCAPE_RE",
    "ANSI_RESET",
    "char_display_width",
    "display_width",
    "strip_ansi",
    "truncate_to_width",
]
