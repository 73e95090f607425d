"""Rectangle and tile datatypes shared by layout and rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in terminal-cell coordinates.

    Attributes:
        x: Left edge coordinate
        y: Top edge coordinate
        width: Rectangle width
        height: Rectangle height
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class Tile:
    """One laid-out rectangle bound to a file or folder of the current directory.

    ``descendants`` is ``None`` for files. ``percentage`` is the entry's share
    of the directory size in the range ``[0, 1]``.
    """

    rect: Rect
    name: str
    size: int
    is_dir: bool
    descendants: int | None
    percentage: float


__all__ = ["Rect", "Tile"]
