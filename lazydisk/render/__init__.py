"""Rendering engine for the treemap terminal view.

``TerminalDisplay`` composes a full frame with ``build_frame`` and writes it
to the terminal in one ``os.write`` call. Rendering never mutates the tree,
the board, or the UI state it is given.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable

from ..file_tree_model import FileTree
from ..runtime.effects import UiEffects
from ..runtime.ui_mode import UiMode
from ..treemap import Board
from ..ui_theme import UITheme
from .canvas import Canvas
from .format import format_size, printable
from .frame import KEY_LEGEND, build_frame


def _terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


class TerminalDisplay:
    """Display backed by an ANSI terminal file descriptor."""

    def __init__(
        self,
        stdout_fd: int,
        theme: UITheme,
        size: Callable[[], tuple[int, int]] = _terminal_size,
    ) -> None:
        self.stdout_fd = stdout_fd
        self.theme = theme
        self._size = size

    def size(self) -> tuple[int, int]:
        return self._size()

    def render(self, file_tree: FileTree, board: Board, ui_mode: UiMode, ui_effects: UiEffects) -> None:
        columns, rows = self.size()
        canvas = build_frame(file_tree, board, ui_mode, ui_effects, self.theme, columns, rows)
        os.write(self.stdout_fd, canvas.to_ansi().encode("utf-8", errors="replace"))


__all__ = [
    "Canvas",
    "KEY_LEGEND",
    "TerminalDisplay",
    "build_frame",
    "format_size",
    "printable",
]
