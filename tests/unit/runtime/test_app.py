"""Tests for the interactive app state machine."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazydisk.file_tree_model import EntryMetadata, FileTree
from lazydisk.input.commands import (
    CancelDelete,
    ConfirmDelete,
    Enter,
    Exit,
    Leave,
    MoveSelection,
    PromptDelete,
    ResetUiMode,
)
from lazydisk.runtime.app import App, board_bounds
from lazydisk.runtime.events import AppEvent
from lazydisk.runtime.ui_mode import DeleteFile, ErrorMessage, Loading, Normal, ScreenTooSmall
from lazydisk.treemap import Board, Direction, Rect

ROOT = Path("/scan")
ROOT_LENGTH = len(ROOT.parts)


class _RecordingDisplay:
    def __init__(self) -> None:
        self.modes = []

    def render(self, file_tree, board, ui_mode, ui_effects) -> None:
        self.modes.append(ui_mode)


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class AppTests(unittest.TestCase):
    def setUp(self) -> None:
        self.display = _RecordingDisplay()
        self.events: list[AppEvent] = []
        self.removed: list[Path] = []
        self.clock = _Clock()
        self.app = App(
            FileTree(ROOT),
            Board(Rect(0, 0, 80, 20)),
            self.display,
            on_event=self.events.append,
            remove_path=self.removed.append,
            clock=self.clock,
        )
        self._add("a.txt", 100)
        self._add("b", is_dir=True)
        self._add("b/c.txt", 300)
        self.app.start_ui()

    def _add(self, relative: str, size: int = 0, is_dir: bool = False) -> None:
        metadata = EntryMetadata(is_dir=is_dir, size=size, mtime_ns=0)
        self.app.add_entry_to_base_folder(metadata, ROOT / relative, ROOT_LENGTH)

    def test_start_ui_happens_once(self) -> None:
        self.assertIsInstance(self.app.ui_mode, Normal)
        self.assertEqual([tile.name for tile in self.app.board.tiles], ["b", "a.txt"])
        frames = len(self.display.modes)

        self.app.start_ui()

        self.assertEqual(len(self.display.modes), frames)

    def test_tiles_reflect_one_to_three_ratio(self) -> None:
        by_name = {tile.name: tile for tile in self.app.board.tiles}

        self.assertAlmostEqual(by_name["b"].rect.area / by_name["a.txt"].rect.area, 3.0, places=6)

    def test_enter_selected_folder_and_go_back_up(self) -> None:
        self.app.handle_command(Enter())

        self.assertEqual(self.app.file_tree.current_folder_names, ["b"])
        self.assertEqual([tile.name for tile in self.app.board.tiles], ["c.txt"])
        self.assertEqual(self.app.board.selected_index, 0)
        self.assertEqual(self.events, [AppEvent.PATH_CHANGE])
        self.assertTrue(self.app.ui_effects.frame_around_current_path)

        self.app.handle_command(Leave())

        self.assertEqual(self.app.file_tree.current_folder_names, [])
        self.assertEqual(self.events, [AppEvent.PATH_CHANGE, AppEvent.PATH_CHANGE])

    def test_enter_on_file_does_nothing(self) -> None:
        self.app.handle_command(MoveSelection(Direction.RIGHT))
        if self.app.board.currently_selected().name != "a.txt":
            self.app.handle_command(MoveSelection(Direction.DOWN))
        self.assertEqual(self.app.board.currently_selected().name, "a.txt")

        self.app.handle_command(Enter())

        self.assertEqual(self.app.file_tree.current_folder_names, [])
        self.assertEqual(self.events, [])

    def test_leaving_root_flags_path_error(self) -> None:
        self.app.handle_command(Leave())

        self.assertEqual(self.events, [AppEvent.PATH_ERROR])
        self.assertTrue(self.app.ui_effects.current_path_is_red)

        self.clock.now += 1.0
        self.app.tick()
        self.assertFalse(self.app.ui_effects.current_path_is_red)

    def test_confirmed_deletion_updates_tree_and_space_freed(self) -> None:
        self.app.handle_command(Enter())
        self.app.handle_command(PromptDelete())
        self.assertIsInstance(self.app.ui_mode, DeleteFile)
        self.assertEqual(self.app.ui_mode.file_to_delete.full_path(), ROOT / "b" / "c.txt")

        self.app.handle_command(ConfirmDelete())

        self.assertEqual(self.removed, [ROOT / "b" / "c.txt"])
        self.assertIsInstance(self.app.ui_mode, Normal)
        self.assertEqual(self.app.file_tree.space_freed, 300)
        self.assertEqual(self.app.file_tree.root.size, 100)
        self.assertEqual(self.app.board.tiles, [])
        self.assertIn(AppEvent.FILE_DELETED, self.events)
        self.assertTrue(self.app.ui_effects.frame_around_space_freed)

    def test_failed_deletion_shows_error_and_keeps_tree(self) -> None:
        def refuse(path: Path) -> None:
            raise PermissionError(13, "Permission denied", str(path))

        self.app._remove_path = refuse
        self.app.handle_command(PromptDelete())
        self.app.handle_command(ConfirmDelete())

        self.assertIsInstance(self.app.ui_mode, ErrorMessage)
        self.assertIn("Permission denied", self.app.ui_mode.message)
        self.assertEqual(self.app.file_tree.root.size, 400)
        self.assertEqual(self.app.file_tree.space_freed, 0)

        self.app.handle_command(ResetUiMode())
        self.assertIsInstance(self.app.ui_mode, Normal)

    def test_cancel_deletion_returns_to_browsing(self) -> None:
        self.app.handle_command(PromptDelete())
        self.app.handle_command(CancelDelete())

        self.assertIsInstance(self.app.ui_mode, Normal)
        self.assertEqual(self.removed, [])

    def test_prompt_without_selection_is_ignored(self) -> None:
        app = App(FileTree(ROOT), Board(Rect(0, 0, 80, 20)), self.display)

        app.handle_command(PromptDelete())

        self.assertIsInstance(app.ui_mode, Loading)

    def test_small_terminal_switches_mode_and_back(self) -> None:
        self.app.resize(30, 10)
        self.assertIsInstance(self.app.ui_mode, ScreenTooSmall)

        self.app.resize(100, 30)
        self.assertIsInstance(self.app.ui_mode, Normal)
        self.assertEqual(self.app.board.bounds, board_bounds(100, 30))

    def test_exit_stops_the_app(self) -> None:
        self.app.handle_command(Exit())

        self.assertFalse(self.app.is_running)
        self.assertEqual(self.events, [AppEvent.APP_EXIT])

    def test_unknown_command_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            self.app.handle_command(object())


class BoardBoundsTests(unittest.TestCase):
    def test_title_and_status_rows_are_reserved(self) -> None:
        self.assertEqual(board_bounds(80, 24), Rect(0.0, 0.0, 80.0, 22.0))
        self.assertEqual(board_bounds(10, 1), Rect(0.0, 0.0, 10.0, 0.0))


if __name__ == "__main__":
    unittest.main()
