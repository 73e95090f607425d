"""Session bootstrap: build the tree, board, display, and scanner, then run the loop."""

from __future__ import annotations

import logging
import os
import sys
from functools import partial
from pathlib import Path
from queue import Queue

from ..file_tree_model import FileTree, remove_path
from ..render import TerminalDisplay
from ..scan import Instruction, Scanner
from ..treemap import DEFAULT_MIN_TILE_AREA, Board
from ..ui_theme import resolve_theme
from .app import App, board_bounds
from .events import AppEvent
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def _log_event(event: AppEvent) -> None:
    logger.debug("app event: %s", event.name)


def run_app(
    path: Path,
    theme: str | None = None,
    *,
    no_color: bool = False,
    use_trash: bool = False,
    apparent_size: bool = False,
    min_tile_area: float = DEFAULT_MIN_TILE_AREA,
    timing: RuntimeLoopTiming | None = None,
) -> None:
    """Scan ``path`` in the background and browse it until the user exits."""
    try:
        stdin_fd = sys.stdin.fileno()
        stdout_fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError) as exc:
        # Replaced or closed standard streams have no usable descriptor.
        raise SystemExit("lazydisk needs an interactive terminal.") from exc
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("lazydisk needs an interactive terminal.")

    root = path.resolve()

    instructions: Queue[Instruction] = Queue()
    file_tree = FileTree(root)
    display = TerminalDisplay(stdout_fd, resolve_theme(theme, no_color=no_color))
    columns, rows = display.size()
    board = Board(board_bounds(columns, rows), min_tile_area)
    app = App(
        file_tree,
        board,
        display,
        on_event=_log_event,
        remove_path=partial(remove_path, use_trash=use_trash),
    )
    app.resize(columns, rows)

    terminal = TerminalController(stdin_fd, stdout_fd)
    scanner = Scanner(root, instructions, apparent_size=apparent_size)
    logger.info("scanning %s (trash=%s, apparent_size=%s)", root, use_trash, apparent_size)
    scanner.start()
    try:
        run_main_loop(app, instructions, terminal, stdin_fd, timing or RuntimeLoopTiming())
    finally:
        scanner.stop()
    logger.info(
        "session ended: freed %d bytes, %d unreadable entries",
        file_tree.space_freed,
        file_tree.failed_to_read,
    )


__all__ = ["run_app"]
