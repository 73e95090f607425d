"""Cell grid that frame composition draws into before serialization."""

from __future__ import annotations

from .ansi import ANSI_RESET, char_display_width

# Placeholder for the right half of a double-width character.
_WIDE_TAIL = ""

BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"
BOX_TOP_LEFT = "┌"
BOX_TOP_RIGHT = "┐"
BOX_BOTTOM_LEFT = "└"
BOX_BOTTOM_RIGHT = "┘"


class Canvas:
    """Fixed-size grid of characters, each with its own SGR style prefix."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.chars = [[" "] * self.width for _ in range(self.height)]
        self.styles = [[""] * self.width for _ in range(self.height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, ch: str, style: str = "") -> None:
        if self._inside(x, y):
            self.chars[y][x] = ch
            self.styles[y][x] = style

    def fill(self, x0: int, y0: int, x1: int, y1: int, style: str, ch: str = " ") -> None:
        """Fill the half-open cell range ``[x0, x1) x [y0, y1)``."""
        for y in range(max(0, y0), min(self.height, y1)):
            for x in range(max(0, x0), min(self.width, x1)):
                self.chars[y][x] = ch
                self.styles[y][x] = style

    def text(self, x: int, y: int, text: str, style: str = "", max_x: int | None = None) -> int:
        """Write ``text`` from column ``x``, stopping before ``max_x``; return the next column."""
        limit = self.width if max_x is None else min(self.width, max_x)
        col = x
        for ch in text:
            w = char_display_width(ch)
            if w == 0:
                continue
            if col + w > limit:
                break
            self.put(col, y, ch, style)
            if w == 2:
                self.put(col + 1, y, _WIDE_TAIL, style)
            col += w
        return col

    def box(self, x0: int, y0: int, x1: int, y1: int, style: str) -> None:
        """Draw a border along the edges of the half-open range ``[x0, x1) x [y0, y1)``."""
        right = x1 - 1
        bottom = y1 - 1
        if right < x0 or bottom < y0:
            return
        if right == x0 or bottom == y0:
            self.fill(x0, y0, x1, y1, style, BOX_HORIZONTAL if bottom == y0 else BOX_VERTICAL)
            return
        for x in range(x0 + 1, right):
            self.put(x, y0, BOX_HORIZONTAL, style)
            self.put(x, bottom, BOX_HORIZONTAL, style)
        for y in range(y0 + 1, bottom):
            self.put(x0, y, BOX_VERTICAL, style)
            self.put(right, y, BOX_VERTICAL, style)
        self.put(x0, y0, BOX_TOP_LEFT, style)
        self.put(right, y0, BOX_TOP_RIGHT, style)
        self.put(x0, bottom, BOX_BOTTOM_LEFT, style)
        self.put(right, bottom, BOX_BOTTOM_RIGHT, style)

    def row_text(self, y: int) -> str:
        """Return the unstyled characters of row ``y``."""
        return "".join(self.chars[y])

    def to_ansi(self) -> str:
        """Serialize the grid as absolute-positioned ANSI rows."""
        out: list[str] = []
        for y in range(self.height):
            out.append(f"\x1b[{y + 1};1H")
            current = None
            for x in range(self.width):
                style = self.styles[y][x]
                if style != current:
                    out.append(ANSI_RESET)
                    out.append(style)
                    current = style
                out.append(self.chars[y][x])
            out.append(ANSI_RESET)
        return "".join(out)


__all__ = ["Canvas"]
