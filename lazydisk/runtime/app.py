"""Application state machine tying the file tree, the board, and the display.

Every mutation of the tree or the board happens through ``App`` methods on
the UI thread: scan instructions (via ``lazydisk.scan.consumer``) and decoded
user commands (via ``handle_command``). UI modes only change here.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from ..file_tree_model import EntryMetadata, File, FileTree, remove_path
from ..input.commands import (
    CancelDelete,
    Command,
    ConfirmDelete,
    Enter,
    Exit,
    Leave,
    MoveSelection,
    PromptDelete,
    ResetUiMode,
)
from ..treemap import Board, Direction, Rect
from .effects import UiEffects
from .events import AppEvent
from .ui_mode import DeleteFile, ErrorMessage, FileToDelete, Loading, Normal, ScreenTooSmall, UiMode

logger = logging.getLogger(__name__)

MIN_COLUMNS = 50
MIN_ROWS = 15
TITLE_ROWS = 1
STATUS_ROWS = 1


class Display(Protocol):
    """Paints a frame; must not mutate any of its arguments."""

    def render(self, file_tree: FileTree, board: Board, ui_mode: UiMode, ui_effects: UiEffects) -> None: ...


def board_bounds(columns: int, rows: int) -> Rect:
    """Return the board area for a terminal of ``columns`` x ``rows`` cells."""
    return Rect(0.0, 0.0, float(max(0, columns)), float(max(0, rows - TITLE_ROWS - STATUS_ROWS)))


class App:
    """Interactive disk-usage session."""

    def __init__(
        self,
        file_tree: FileTree,
        board: Board,
        display: Display,
        *,
        on_event: Callable[[AppEvent], None] | None = None,
        remove_path: Callable[[Path], None] = remove_path,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.file_tree = file_tree
        self.board = board
        self.display = display
        self.ui_effects = UiEffects()
        self.ui_mode: UiMode = Loading()
        self.is_running = True
        self.scan_complete = False
        self._on_event = on_event
        self._remove_path = remove_path
        self._clock = clock

    # Rendering -----------------------------------------------------------

    def render(self) -> None:
        self.display.render(self.file_tree, self.board, self.ui_mode, self.ui_effects)

    def _update_board(self) -> None:
        self.board.change_files(self.file_tree.get_current_folder())

    def render_and_update_board(self) -> None:
        """Rebuild tiles from the current directory, then repaint."""
        self._update_board()
        self.render()

    def resize(self, columns: int, rows: int) -> None:
        """Track terminal size, toggling ``ScreenTooSmall`` and re-laying out the board."""
        mode_changed = False
        if columns < MIN_COLUMNS or rows < MIN_ROWS:
            if not isinstance(self.ui_mode, ScreenTooSmall):
                self.ui_mode = ScreenTooSmall()
                mode_changed = True
        elif isinstance(self.ui_mode, ScreenTooSmall):
            self.ui_mode = self._idle_mode()
            mode_changed = True

        bounds = board_bounds(columns, rows)
        if bounds != self.board.bounds:
            self.board.change_area(bounds)
            self.render()
        elif mode_changed:
            self.render()

    def tick(self, now: float | None = None) -> None:
        """Expire timed effects, repainting when one ends."""
        if self.ui_effects.expire(self._clock() if now is None else now):
            self.render()

    # Events and modes ----------------------------------------------------

    def _emit(self, event: AppEvent) -> None:
        self.ui_effects.handle_event(event, self._clock())
        if self._on_event is not None:
            self._on_event(event)

    def _idle_mode(self) -> UiMode:
        return Normal() if self.scan_complete else Loading()

    def start_ui(self) -> None:
        """Leave loading mode once the scan has completed."""
        if self.scan_complete:
            return
        self.scan_complete = True
        if isinstance(self.ui_mode, Loading):
            self.ui_mode = Normal()
        self.render_and_update_board()

    def reset_ui_mode(self) -> None:
        """Drop any dialog or error and go back to browsing."""
        if isinstance(self.ui_mode, (Loading, Normal)):
            return
        self.ui_mode = self._idle_mode()

    def normal_mode(self) -> None:
        self.ui_mode = self._idle_mode()
        self.render_and_update_board()

    def exit(self) -> None:
        self.is_running = False
        self._emit(AppEvent.APP_EXIT)

    # Scan bookkeeping ----------------------------------------------------

    def add_entry_to_base_folder(self, metadata: EntryMetadata, entry_path: Path, path_length: int) -> None:
        self.file_tree.add_entry(metadata, entry_path, path_length)

    def increment_failed_to_read(self, path: Path | None = None, path_length: int = 0) -> None:
        self.file_tree.record_read_failure(path, path_length)

    def increment_loading_progress_indicator(self) -> None:
        self.ui_effects.increment_loading_progress_indicator()

    # Navigation ----------------------------------------------------------

    def move_selected(self, direction: Direction) -> None:
        self.board.move_selected(direction)
        self.render()

    def enter_selected(self) -> None:
        """Descend into the selected tile when it is a folder."""
        tile = self.board.currently_selected()
        if tile is None:
            return
        item = self.file_tree.item_in_current_folder(tile.name)
        if item is None or isinstance(item, File):
            return
        self.file_tree.enter_folder(tile.name)
        self._update_board()
        self.board.reset_selected_index()
        self._emit(AppEvent.PATH_CHANGE)
        self.render()

    def go_up(self) -> None:
        """Move to the parent directory, flagging an attempt to leave the root."""
        succeeded = self.file_tree.leave_folder()
        self._update_board()
        self.board.reset_selected_index()
        self._emit(AppEvent.PATH_CHANGE if succeeded else AppEvent.PATH_ERROR)
        self.render()

    # Deletion ------------------------------------------------------------

    def get_file_to_delete(self) -> FileToDelete | None:
        tile = self.board.currently_selected()
        if tile is None:
            return None
        return FileToDelete(
            path_in_filesystem=self.file_tree.path_in_filesystem,
            path_to_file=(*self.file_tree.current_folder_names, tile.name),
            file_metadata=tile,
        )

    def prompt_file_deletion(self) -> None:
        file_to_delete = self.get_file_to_delete()
        if file_to_delete is None:
            return
        self.ui_mode = DeleteFile(file_to_delete)
        self.render()

    def delete_file(self, file_to_delete: FileToDelete) -> bool:
        """Remove the entry from disk, then from the tree.

        A filesystem error switches to ``ErrorMessage`` and leaves the tree
        untouched. Returns whether the entry was removed.
        """
        full_path = file_to_delete.full_path()
        try:
            self._remove_path(full_path)
        except OSError as exc:
            logger.warning("failed to delete %s: %s", full_path, exc)
            self.ui_mode = ErrorMessage(str(exc))
            self.render()
            return False

        freed = self.file_tree.delete_file(file_to_delete)
        logger.info("deleted %s (%d bytes)", full_path, freed)
        self.ui_mode = self._idle_mode()
        self._update_board()
        self.board.reset_selected_index()
        self._emit(AppEvent.FILE_DELETED)
        self.render()
        return True

    # Commands ------------------------------------------------------------

    def handle_command(self, command: Command) -> None:
        """Apply one decoded user command."""
        if isinstance(command, MoveSelection):
            self.move_selected(command.direction)
        elif isinstance(command, Enter):
            self.enter_selected()
        elif isinstance(command, Leave):
            self.go_up()
        elif isinstance(command, PromptDelete):
            self.prompt_file_deletion()
        elif isinstance(command, ConfirmDelete):
            if isinstance(self.ui_mode, DeleteFile):
                self.delete_file(self.ui_mode.file_to_delete)
        elif isinstance(command, CancelDelete):
            self.normal_mode()
        elif isinstance(command, ResetUiMode):
            self.reset_ui_mode()
            self.render()
        elif isinstance(command, Exit):
            self.exit()
        else:
            raise TypeError(f"unknown command: {command!r}")


__all__ = [
    "App",
    "Display",
    "MIN_COLUMNS",
    "MIN_ROWS",
    "board_bounds",
]
