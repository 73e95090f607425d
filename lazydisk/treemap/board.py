"""Treemap board: tiles for the current directory plus the selection cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..file_tree_model import File, Folder
from .geometry import Rect, Tile
from .squarify import LayoutItem, squarify

DEFAULT_MIN_TILE_AREA = 4.0
EPSILON = 1e-6


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class _TileSource:
    name: str
    size: int
    is_dir: bool
    descendants: int | None


def _overlap(start_a: float, end_a: float, start_b: float, end_b: float) -> float:
    return min(end_a, end_b) - max(start_a, start_b)


def _direction_key(
    source: Rect,
    other: Rect,
    direction: Direction,
) -> tuple[float, bool, float] | None:
    """Rank ``other`` as a move target from ``source``, ``None`` when it is behind.

    Smaller keys are better: gap along the movement axis first, then tiles
    sharing an edge span with ``source``, then perpendicular center distance.
    """
    if direction is Direction.RIGHT:
        gap = other.x - source.right
        overlap = _overlap(source.y, source.bottom, other.y, other.bottom)
        perpendicular = abs(other.center_y - source.center_y)
    elif direction is Direction.LEFT:
        gap = source.x - other.right
        overlap = _overlap(source.y, source.bottom, other.y, other.bottom)
        perpendicular = abs(other.center_y - source.center_y)
    elif direction is Direction.DOWN:
        gap = other.y - source.bottom
        overlap = _overlap(source.x, source.right, other.x, other.right)
        perpendicular = abs(other.center_x - source.center_x)
    else:
        gap = source.y - other.bottom
        overlap = _overlap(source.x, source.right, other.x, other.right)
        perpendicular = abs(other.center_x - source.center_x)

    if gap < -EPSILON:
        return None
    if gap < EPSILON:
        gap = 0.0
    return (gap, overlap <= EPSILON, perpendicular)


class Board:
    """Squarified layout of one directory and the selected tile.

    The tile list is rebuilt from scratch on every content or area change;
    only the selection carries over, by name when possible and by index
    otherwise.
    """

    def __init__(self, bounds: Rect, min_tile_area: float = DEFAULT_MIN_TILE_AREA) -> None:
        self.bounds = bounds
        self.min_tile_area = min_tile_area
        self.tiles: list[Tile] = []
        self.selected_index: int | None = None
        self._sources: list[_TileSource] = []

    def change_files(self, folder: Folder) -> None:
        """Rebuild tiles from the children of ``folder``."""
        sources: list[_TileSource] = []
        for name, child in folder.children.items():
            if isinstance(child, Folder):
                sources.append(_TileSource(name, child.size, True, child.num_descendants))
            elif isinstance(child, File):
                sources.append(_TileSource(name, child.size, False, None))
            else:
                raise TypeError(f"unexpected tree node: {child!r}")
        self._sources = sources
        self._relayout()

    def change_area(self, bounds: Rect) -> None:
        """Re-layout the current tiles into new bounds."""
        if bounds == self.bounds:
            return
        self.bounds = bounds
        self._relayout()

    def _relayout(self) -> None:
        previous = self.currently_selected()
        by_name = {source.name: source for source in self._sources}
        total_size = sum(source.size for source in self._sources)
        items = [LayoutItem(source.name, source.size) for source in self._sources]

        tiles: list[Tile] = []
        for item, rect in squarify(items, self.bounds, self.min_tile_area):
            source = by_name[item.name]
            percentage = source.size / total_size if total_size > 0 else 0.0
            tiles.append(
                Tile(
                    rect=rect,
                    name=source.name,
                    size=source.size,
                    is_dir=source.is_dir,
                    descendants=source.descendants,
                    percentage=percentage,
                )
            )
        self.tiles = tiles

        if not tiles:
            self.selected_index = None
            return
        if previous is not None:
            for idx, tile in enumerate(tiles):
                if tile.name == previous.name:
                    self.selected_index = idx
                    return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = min(self.selected_index, len(tiles) - 1)

    def reset_selected_index(self) -> None:
        """Select the first (largest) tile, or nothing when there are no tiles."""
        self.selected_index = 0 if self.tiles else None

    def currently_selected(self) -> Tile | None:
        if self.selected_index is None or not (0 <= self.selected_index < len(self.tiles)):
            return None
        return self.tiles[self.selected_index]

    def move_selected(self, direction: Direction) -> bool:
        """Select the nearest tile in ``direction``; return whether selection moved.

        Only tiles lying fully past the selected tile's edge qualify, so
        moving off the board edge leaves the selection where it is.
        """
        current = self.currently_selected()
        if current is None:
            return False

        best_index: int | None = None
        best_key: tuple[float, bool, float] | None = None
        for idx, tile in enumerate(self.tiles):
            if idx == self.selected_index:
                continue
            key = _direction_key(current.rect, tile.rect, direction)
            if key is None:
                continue
            if best_key is None or key < best_key:
                best_key = key
                best_index = idx

        if best_index is None:
            return False
        self.selected_index = best_index
        return True

    def move_selected_up(self) -> bool:
        return self.move_selected(Direction.UP)

    def move_selected_down(self) -> bool:
        return self.move_selected(Direction.DOWN)

    def move_selected_left(self) -> bool:
        return self.move_selected(Direction.LEFT)

    def move_selected_right(self) -> bool:
        return self.move_selected(Direction.RIGHT)


__all__ = ["Board", "Direction", "DEFAULT_MIN_TILE_AREA"]
