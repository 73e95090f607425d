"""Messages sent from the filesystem scanner to the interactive consumer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import EntryMetadata


@dataclass(frozen=True)
class EntryDiscovered:
    """A file or directory found at ``path``.

    ``path_length`` is the component count of the scan root, used to
    position ``path`` inside the tree.
    """

    metadata: EntryMetadata
    path: Path
    path_length: int


@dataclass(frozen=True)
class ReadFailed:
    """An entry or directory listing that could not be read."""

    path: Path | None = None
    path_length: int = 0
    error: str = ""


@dataclass(frozen=True)
class ProgressTick:
    """Periodic heartbeat for the loading indicator."""


@dataclass(frozen=True)
class ScanComplete:
    """Final message of a scan."""


Instruction = EntryDiscovered | ReadFailed | ProgressTick | ScanComplete


__all__ = [
    "EntryDiscovered",
    "ReadFailed",
    "ProgressTick",
    "ScanComplete",
    "Instruction",
]
