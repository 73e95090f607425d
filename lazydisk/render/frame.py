"""Frame composition: title bar, treemap tiles, status bar, and dialogs.

Composition is a pure read of the tree, board, mode, and effects; it only
writes into a fresh ``Canvas``.
"""

from __future__ import annotations

from ..file_tree_model import FileTree
from ..runtime.app import MIN_COLUMNS, MIN_ROWS, TITLE_ROWS
from ..runtime.effects import UiEffects
from ..runtime.ui_mode import DeleteFile, ErrorMessage, Loading, ScreenTooSmall, UiMode
from ..treemap import Board, Tile
from ..ui_theme import UITheme
from .ansi import display_width, truncate_to_width
from .canvas import Canvas
from .format import format_size, printable

LOADING_SPINNER_FRAMES: tuple[str, ...] = ("|", "/", "-", "\\")
KEY_LEGEND = "←↓↑→/hjkl move · ENTER open · ESC up · Ctrl-D delete · q quit"
MODAL_MAX_WIDTH = 60


def _tile_cells(tile: Tile) -> tuple[int, int, int, int]:
    """Round a tile rectangle to screen cells, below the title rows.

    Rounding both edges independently keeps adjacent tiles gap-free.
    """
    rect = tile.rect
    x0 = int(round(rect.x))
    x1 = int(round(rect.right))
    y0 = int(round(rect.y)) + TITLE_ROWS
    y1 = int(round(rect.bottom)) + TITLE_ROWS
    return x0, y0, x1, y1


def _tile_labels(tile: Tile) -> list[str]:
    name = printable(tile.name) + ("/" if tile.is_dir else "")
    labels = [name, f"{format_size(tile.size)} ({tile.percentage * 100:.0f}%)"]
    if tile.is_dir and tile.descendants is not None:
        labels.append(f"{tile.descendants} files")
    return labels


def _draw_tile(canvas: Canvas, tile: Tile, selected: bool, theme: UITheme) -> None:
    x0, y0, x1, y1 = _tile_cells(tile)
    width = x1 - x0
    height = y1 - y0
    if width <= 0 or height <= 0:
        return

    if selected:
        canvas.fill(x0, y0, x1, y1, theme.tile_selected)
    border_style = theme.tile_selected if selected else theme.tile_border
    text_style = theme.tile_selected if selected else (theme.tile_dir if tile.is_dir else theme.tile_file)
    canvas.box(x0, y0, x1, y1, border_style)

    inner_width = width - 2
    inner_height = height - 2
    if inner_width < 1 or inner_height < 1:
        return
    labels = _tile_labels(tile)[:inner_height]
    if not labels or inner_width < 3:
        canvas.fill(x0 + 1, y0 + 1, x1 - 1, y1 - 1, border_style if selected else theme.tile_dim, "x")
        return

    top = y0 + 1 + max(0, (inner_height - len(labels)) // 2)
    for offset, label in enumerate(labels):
        text = truncate_to_width(label, inner_width)
        left = x0 + 1 + max(0, (inner_width - display_width(text)) // 2)
        canvas.text(left, top + offset, text, text_style, max_x=x1 - 1)


def _draw_title(canvas: Canvas, file_tree: FileTree, ui_mode: UiMode, effects: UiEffects, theme: UITheme) -> None:
    # Read-only lookup; a stale cursor falls back to the scan root.
    folder = file_tree.folder_at(file_tree.current_folder_names)
    current_path = file_tree.current_path()
    if folder is None:
        folder = file_tree.root
        current_path = file_tree.path_in_filesystem
    path_text = printable(str(current_path))
    title = f" {path_text} ({format_size(folder.size)})"
    if effects.frame_around_current_path:
        style = theme.title_flash
    elif effects.current_path_is_red:
        style = theme.path_error
    else:
        style = theme.title

    suffix = ""
    if isinstance(ui_mode, Loading):
        spinner = LOADING_SPINNER_FRAMES[effects.loading_progress_indicator % len(LOADING_SPINNER_FRAMES)]
        suffix = f" scanning {spinner}"
    end = canvas.text(0, 0, truncate_to_width(title, canvas.width - display_width(suffix)), style)
    if suffix:
        canvas.text(end, 0, suffix, theme.loading)


def _draw_status(canvas: Canvas, file_tree: FileTree, effects: UiEffects, theme: UITheme) -> None:
    row = canvas.height - 1
    freed = f" Freed: {format_size(file_tree.space_freed)} "
    col = canvas.text(0, row, freed, theme.status_flash if effects.frame_around_space_freed else theme.status)
    if file_tree.failed_to_read:
        col = canvas.text(col, row, f"· Unreadable: {file_tree.failed_to_read} ", theme.status)
    legend = f"· {KEY_LEGEND}"
    canvas.text(col, row, truncate_to_width(legend, canvas.width - col), theme.status)


def _draw_modal(canvas: Canvas, title: str, lines: list[str], title_style: str, theme: UITheme) -> None:
    content_width = max([display_width(title)] + [display_width(line) for line in lines])
    width = min(canvas.width - 2, min(MODAL_MAX_WIDTH, content_width) + 4)
    height = len(lines) + 4
    x0 = max(0, (canvas.width - width) // 2)
    y0 = max(0, (canvas.height - height) // 2)
    x1 = x0 + width
    y1 = y0 + height
    canvas.fill(x0, y0, x1, y1, theme.modal_text)
    canvas.box(x0, y0, x1, y1, theme.modal_border)
    inner = width - 4
    title_text = truncate_to_width(title, inner)
    canvas.text(x0 + 2 + max(0, (inner - display_width(title_text)) // 2), y0 + 1, title_text, title_style)
    for offset, line in enumerate(lines):
        text = truncate_to_width(line, inner)
        canvas.text(x0 + 2 + max(0, (inner - display_width(text)) // 2), y0 + 3 + offset, text, theme.modal_text)


def build_frame(
    file_tree: FileTree,
    board: Board,
    ui_mode: UiMode,
    ui_effects: UiEffects,
    theme: UITheme,
    columns: int,
    rows: int,
) -> Canvas:
    """Compose one full frame for a terminal of ``columns`` x ``rows``."""
    canvas = Canvas(columns, rows)
    if isinstance(ui_mode, ScreenTooSmall):
        message = truncate_to_width(f"Terminal too small (need {MIN_COLUMNS}x{MIN_ROWS})", columns)
        canvas.text(max(0, (columns - display_width(message)) // 2), rows // 2, message, theme.error_text)
        return canvas

    _draw_title(canvas, file_tree, ui_mode, ui_effects, theme)
    if board.tiles:
        selected = board.currently_selected()
        for tile in board.tiles:
            if tile is not selected:
                _draw_tile(canvas, tile, False, theme)
        if selected is not None:
            _draw_tile(canvas, selected, True, theme)
    else:
        empty = "(scanning…)" if isinstance(ui_mode, Loading) else "(empty folder)"
        canvas.text(max(0, (columns - display_width(empty)) // 2), rows // 2, empty, theme.tile_dim)
    _draw_status(canvas, file_tree, ui_effects, theme)

    if isinstance(ui_mode, DeleteFile):
        target = ui_mode.file_to_delete
        metadata = target.file_metadata
        details = format_size(metadata.size)
        if metadata.is_dir and metadata.descendants is not None:
            details += f", {metadata.descendants} files"
        _draw_modal(
            canvas,
            "Delete?",
            [printable(str(target.full_path())), details, "(y) Yes   (n) No"],
            theme.modal_title,
            theme,
        )
    elif isinstance(ui_mode, ErrorMessage):
        _draw_modal(
            canvas,
            "Error",
            [printable(ui_mode.message), "Press any key to continue"],
            theme.error_text,
            theme,
        )
    return canvas


__all__ = ["KEY_LEGEND", "LOADING_SPINNER_FRAMES", "build_frame"]
