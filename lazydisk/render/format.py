"""Human-readable labels for sizes and paths."""

from __future__ import annotations

_UNITS = ("B", "K", "M", "G", "T", "P")


def format_size(size_bytes: int) -> str:
    """Format a byte count with binary units, e.g. ``1.5M``."""
    value = float(max(0, size_bytes))
    if value < 1024:
        return f"{int(value)}B"
    unit = _UNITS[0]
    for unit in _UNITS[1:]:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f}{unit}"


def printable(text: str) -> str:
    """Replace control characters so names cannot move the terminal cursor."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


__all__ = ["format_size", "printable"]
