"""Background filesystem walker feeding the instruction queue."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from queue import Queue

from ..file_tree_model import entry_metadata_from_stat
from .instructions import EntryDiscovered, Instruction, ProgressTick, ReadFailed, ScanComplete

logger = logging.getLogger(__name__)

PROGRESS_TICK_ENTRIES = 500


class Scanner:
    """Walk ``root`` on a daemon thread and emit one instruction per entry.

    The walk is pre-order, so a directory is always emitted before anything
    inside it. Symlinks are reported as entries but never followed. The
    scanner only ever writes to ``instructions``; it holds no reference to
    the tree it populates.
    """

    def __init__(
        self,
        root: Path,
        instructions: Queue[Instruction],
        *,
        apparent_size: bool = False,
        progress_every: int = PROGRESS_TICK_ENTRIES,
    ) -> None:
        self.root = root
        self.apparent_size = apparent_size
        self.progress_every = max(1, progress_every)
        self._instructions = instructions
        self._stop_requested = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the walk on a background thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self.run,
            name="lazydisk-scanner",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask the walk to stop producing instructions."""
        self._stop_requested.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def run(self) -> None:
        """Walk the tree synchronously; ends with ``ScanComplete`` unless stopped."""
        try:
            self._walk()
        except Exception:
            logger.exception("scan of %s aborted", self.root)
        if self._stop_requested.is_set():
            logger.debug("scan of %s stopped early", self.root)
            return
        self._instructions.put(ScanComplete())

    def _walk(self) -> None:
        path_length = len(self.root.parts)
        pending: list[Path] = [self.root]
        discovered = 0

        while pending:
            if self._stop_requested.is_set():
                return
            directory = pending.pop()
            try:
                with os.scandir(directory) as it:
                    entries = list(it)
            except OSError as exc:
                logger.debug("cannot list %s: %s", directory, exc)
                self._instructions.put(ReadFailed(path=directory, path_length=path_length, error=str(exc)))
                continue

            subdirectories: list[Path] = []
            for entry in entries:
                if self._stop_requested.is_set():
                    return
                entry_path = Path(entry.path)
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    stat_result = entry.stat(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("cannot stat %s: %s", entry_path, exc)
                    self._instructions.put(ReadFailed(path=entry_path, path_length=path_length, error=str(exc)))
                    continue

                metadata = entry_metadata_from_stat(stat_result, is_dir, self.apparent_size)
                self._instructions.put(EntryDiscovered(metadata=metadata, path=entry_path, path_length=path_length))
                if is_dir:
                    subdirectories.append(entry_path)

                discovered += 1
                if discovered % self.progress_every == 0:
                    self._instructions.put(ProgressTick())

            # Reverse so the stack pops directories in listing order.
            pending.extend(reversed(subdirectories))


__all__ = ["Scanner", "PROGRESS_TICK_ENTRIES"]
