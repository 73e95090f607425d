"""Tests for applying scan instructions on the UI side."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from queue import Queue

from lazydisk.file_tree_model import EntryMetadata, FileTree
from lazydisk.runtime.app import App
from lazydisk.runtime.ui_mode import Loading, Normal
from lazydisk.scan import (
    EntryDiscovered,
    ProgressTick,
    ReadFailed,
    ScanComplete,
    Scanner,
    apply_instruction,
    drain_instructions,
    handle_instructions,
    is_under_cursor,
)
from lazydisk.treemap import Board, Rect

ROOT = Path("/data")
ROOT_LENGTH = len(ROOT.parts)


class _RecordingDisplay:
    def __init__(self) -> None:
        self.frames = 0

    def render(self, file_tree, board, ui_mode, ui_effects) -> None:
        self.frames += 1


def _entry(relative: str, size: int = 0, is_dir: bool = False) -> EntryDiscovered:
    return EntryDiscovered(
        metadata=EntryMetadata(is_dir=is_dir, size=size, mtime_ns=0),
        path=ROOT / relative,
        path_length=ROOT_LENGTH,
    )


class IsUnderCursorTests(unittest.TestCase):
    def test_root_cursor_sees_everything(self) -> None:
        self.assertTrue(is_under_cursor([], ROOT / "a", ROOT_LENGTH))
        self.assertTrue(is_under_cursor([], ROOT / "a" / "b" / "c", ROOT_LENGTH))

    def test_nested_cursor_only_sees_its_subtree(self) -> None:
        cursor = ["a", "b"]

        self.assertTrue(is_under_cursor(cursor, ROOT / "a" / "b" / "c", ROOT_LENGTH))
        self.assertTrue(is_under_cursor(cursor, ROOT / "a" / "b" / "c" / "d", ROOT_LENGTH))
        self.assertFalse(is_under_cursor(cursor, ROOT / "a" / "b", ROOT_LENGTH))
        self.assertFalse(is_under_cursor(cursor, ROOT / "a" / "x" / "c", ROOT_LENGTH))


class ConsumerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.display = _RecordingDisplay()
        self.app = App(FileTree(ROOT), Board(Rect(0, 0, 80, 20)), self.display)

    def test_visible_entry_rebuilds_board(self) -> None:
        effect = apply_instruction(self.app, _entry("a.txt", 100))

        self.assertTrue(effect.board_changed)
        self.assertEqual(self.app.file_tree.root.size, 100)

    def test_entry_outside_cursor_does_not_touch_board(self) -> None:
        apply_instruction(self.app, _entry("a", is_dir=True))
        apply_instruction(self.app, _entry("b", is_dir=True))
        self.app.file_tree.enter_folder("a")

        effect = apply_instruction(self.app, _entry("b/file", 10))

        self.assertFalse(effect.board_changed)
        self.assertFalse(effect.needs_render)

    def test_read_failure_and_progress_only_repaint(self) -> None:
        failed = apply_instruction(self.app, ReadFailed(path=ROOT / "locked", path_length=ROOT_LENGTH))
        tick = apply_instruction(self.app, ProgressTick())

        self.assertEqual(self.app.file_tree.failed_to_read, 1)
        self.assertEqual(self.app.ui_effects.loading_progress_indicator, 1)
        self.assertTrue(failed.needs_render and not failed.board_changed)
        self.assertTrue(tick.needs_render and not tick.board_changed)

    def test_unknown_instruction_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            apply_instruction(self.app, object())

    def test_drain_applies_batch_and_renders_once(self) -> None:
        queue: Queue = Queue()
        for idx in range(5):
            queue.put(_entry(f"f{idx}", 10 * (idx + 1)))

        applied = drain_instructions(self.app, queue, max_batch=3)

        self.assertEqual(applied, 3)
        self.assertEqual(self.display.frames, 1)
        self.assertEqual(len(self.app.board.tiles), 3)
        self.assertEqual(queue.qsize(), 2)

    def test_drain_on_empty_queue_does_nothing(self) -> None:
        self.assertEqual(drain_instructions(self.app, Queue()), 0)
        self.assertEqual(self.display.frames, 0)

    def test_scan_complete_switches_to_normal_mode(self) -> None:
        queue: Queue = Queue()
        queue.put(_entry("a.txt", 100))
        queue.put(ScanComplete())

        self.assertIsInstance(self.app.ui_mode, Loading)
        drain_instructions(self.app, queue)

        self.assertTrue(self.app.scan_complete)
        self.assertIsInstance(self.app.ui_mode, Normal)
        self.assertEqual(self.app.board.currently_selected().name, "a.txt")

    def test_queued_entry_below_deleted_folder_is_dropped(self) -> None:
        app = App(
            FileTree(ROOT),
            Board(Rect(0, 0, 80, 20)),
            self.display,
            remove_path=lambda path: None,
        )
        apply_instruction(app, _entry("b", is_dir=True))
        apply_instruction(app, _entry("b/c.txt", 300))
        queue: Queue = Queue()
        queue.put(_entry("b/d.txt", 700))

        file_to_delete = app.get_file_to_delete()
        assert file_to_delete is not None
        self.assertTrue(app.delete_file(file_to_delete))
        drain_instructions(app, queue)

        self.assertNotIn("b", app.file_tree.root.children)
        self.assertEqual(app.file_tree.root.size, 0)
        self.assertEqual(app.file_tree.root.num_descendants, 0)
        self.assertEqual(app.file_tree.space_freed, 300)
        self.assertEqual(app.board.tiles, [])


class ScanToDeleteScenarioTests(unittest.TestCase):
    def test_scan_browse_and_delete_end_to_end(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_bytes(b"a" * 100)
            (root / "b").mkdir()
            (root / "b" / "c.txt").write_bytes(b"c" * 300)

            queue: Queue = Queue()
            display = _RecordingDisplay()
            app = App(FileTree(root), Board(Rect(0, 0, 80, 20)), display)
            Scanner(root, queue, apparent_size=True).start()

            applied = handle_instructions(app, queue)

            self.assertEqual(applied, 4)
            self.assertIsInstance(app.ui_mode, Normal)
            self.assertEqual(app.file_tree.root.size, 400)
            by_name = {tile.name: tile for tile in app.board.tiles}
            self.assertAlmostEqual(by_name["b"].rect.area / by_name["a.txt"].rect.area, 3.0, places=6)

            app.enter_selected()
            app.prompt_file_deletion()
            self.assertTrue(app.delete_file(app.ui_mode.file_to_delete))

            self.assertFalse((root / "b" / "c.txt").exists())
            self.assertEqual(app.file_tree.space_freed, 300)
            self.assertEqual(app.file_tree.root.size, 100)


if __name__ == "__main__":
    unittest.main()
