"""Treemap layout engine and the selection board built on top of it."""

from __future__ import annotations

from .board import DEFAULT_MIN_TILE_AREA, Board, Direction
from .geometry import Rect, Tile
from .squarify import LayoutItem, scaled_areas, squarify

__all__ = [
    "Board",
    "Direction",
    "DEFAULT_MIN_TILE_AREA",
    "Rect",
    "Tile",
    "LayoutItem",
    "scaled_areas",
    "squarify",
]
