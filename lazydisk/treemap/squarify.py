"""Squarified treemap layout.

Items are sorted by descending size (ties by name), converted to target areas
and packed into rows laid along the shorter side of the remaining rectangle.
A row keeps growing while that improves its worst aspect ratio; then it is
committed and the rest of the items continue in the leftover rectangle.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .geometry import Rect

_MIN_SIDE = 1e-6


@dataclass(frozen=True)
class LayoutItem:
    """One weighted item to place in the treemap."""

    name: str
    size: int


def squarify(
    items: Sequence[LayoutItem],
    bounds: Rect,
    min_tile_area: float = 0.0,
) -> list[tuple[LayoutItem, Rect]]:
    """Partition ``bounds`` into one rectangle per item.

    Each rectangle's area is proportional to the item's size, except that
    items whose share would fall below ``min_tile_area`` are raised to it and
    the others shrink to compensate. The returned rectangles never overlap and
    together cover ``bounds`` exactly. Output order is the layout order
    (descending size, then name).
    """
    if not items:
        return []

    ordered = sorted(items, key=lambda item: (-item.size, item.name))
    if bounds.width <= 0 or bounds.height <= 0:
        return [(item, Rect(bounds.x, bounds.y, 0.0, 0.0)) for item in ordered]

    areas = scaled_areas([item.size for item in ordered], bounds.area, min_tile_area)
    pending = list(zip(ordered, areas))

    result: list[tuple[LayoutItem, Rect]] = []
    rect = bounds
    row: list[tuple[LayoutItem, float]] = []
    index = 0
    while index < len(pending):
        candidate = pending[index]
        if not row or _worst_ratio(row + [candidate], rect) <= _worst_ratio(row, rect):
            row.append(candidate)
            index += 1
            continue
        rect = _layout_row(row, rect, result, is_last=False)
        row = []
    if row:
        _layout_row(row, rect, result, is_last=True)
    return result


def scaled_areas(sizes: Sequence[int], total_area: float, min_area: float) -> list[float]:
    """Convert sizes to areas summing to ``total_area`` with a per-item floor.

    ``sizes`` must be sorted in descending order. When the floor cannot be
    honored for every item, or nothing has a positive size, the area is split
    evenly.
    """
    count = len(sizes)
    if count == 0:
        return []
    total_size = sum(sizes)
    if total_size <= 0 or count * min_area >= total_area:
        return [total_area / count] * count

    clamped: set[int] = set()
    areas = [size / total_size * total_area for size in sizes]
    while True:
        newly_clamped = {
            idx for idx, area in enumerate(areas) if idx not in clamped and area < min_area
        }
        if not newly_clamped:
            return areas
        clamped |= newly_clamped
        free_area = total_area - len(clamped) * min_area
        free_size = sum(size for idx, size in enumerate(sizes) if idx not in clamped)
        free_count = count - len(clamped)
        areas = []
        for idx, size in enumerate(sizes):
            if idx in clamped:
                areas.append(min_area)
            elif free_size > 0:
                areas.append(size / free_size * free_area)
            else:
                areas.append(free_area / free_count)


def _layout_row(
    row: Sequence[tuple[LayoutItem, float]],
    rect: Rect,
    acc: list[tuple[LayoutItem, Rect]],
    is_last: bool,
) -> Rect:
    """Place ``row`` along the shorter side of ``rect`` and return what is left."""
    row_area = sum(area for _, area in row)
    last_idx = len(row) - 1

    if rect.width >= rect.height:
        # Column on the left edge, items stacked top to bottom.
        thickness = rect.width if is_last else min(rect.width, row_area / max(rect.height, _MIN_SIDE))
        y = rect.y
        for idx, (item, area) in enumerate(row):
            height = rect.bottom - y if idx == last_idx else area / max(thickness, _MIN_SIDE)
            acc.append((item, Rect(rect.x, y, thickness, max(0.0, height))))
            y += height
        return Rect(rect.x + thickness, rect.y, max(0.0, rect.width - thickness), rect.height)

    # Row on the top edge, items placed left to right.
    thickness = rect.height if is_last else min(rect.height, row_area / max(rect.width, _MIN_SIDE))
    x = rect.x
    for idx, (item, area) in enumerate(row):
        width = rect.right - x if idx == last_idx else area / max(thickness, _MIN_SIDE)
        acc.append((item, Rect(x, rect.y, max(0.0, width), thickness)))
        x += width
    return Rect(rect.x, rect.y + thickness, rect.width, max(0.0, rect.height - thickness))


def _worst_ratio(row: Sequence[tuple[LayoutItem, float]], rect: Rect) -> float:
    """Measure how far from square the worst tile of ``row`` would be."""
    if not row:
        return float("inf")
    short_side = max(min(rect.width, rect.height), _MIN_SIDE)
    areas = [max(area, _MIN_SIDE) for _, area in row]
    total = sum(areas)
    side_sq = short_side**2
    return max((side_sq * max(areas)) / (total**2), (total**2) / (side_sq * min(areas)))


__all__ = ["LayoutItem", "scaled_areas", "squarify"]
