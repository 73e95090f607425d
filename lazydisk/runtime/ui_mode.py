"""UI modes and the pending-deletion snapshot carried by ``DeleteFile``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..treemap import Tile


@dataclass(frozen=True)
class FileToDelete:
    """What the user asked to delete, captured when the prompt opened.

    The snapshot is independent from the live tree so the confirmation
    dialog keeps showing the same entry while the scan keeps mutating it.
    """

    path_in_filesystem: Path
    path_to_file: tuple[str, ...]
    file_metadata: Tile

    def full_path(self) -> Path:
        return self.path_in_filesystem.joinpath(*self.path_to_file)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Normal:
    pass


@dataclass(frozen=True)
class ScreenTooSmall:
    pass


@dataclass(frozen=True)
class DeleteFile:
    file_to_delete: FileToDelete


@dataclass(frozen=True)
class ErrorMessage:
    message: str


UiMode = Loading | Normal | ScreenTooSmall | DeleteFile | ErrorMessage


__all__ = [
    "FileToDelete",
    "Loading",
    "Normal",
    "ScreenTooSmall",
    "DeleteFile",
    "ErrorMessage",
    "UiMode",
]
