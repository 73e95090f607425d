"""Domain datatypes for the in-memory mirror of a scanned filesystem subtree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EntryMetadata:
    """Metadata observed by the scanner for one filesystem path."""

    is_dir: bool
    size: int
    mtime_ns: int | None = None


@dataclass
class File:
    """Leaf entry carrying its own size."""

    name: str
    size: int
    mtime_ns: int | None = None


@dataclass
class Folder:
    """Directory entry whose size is the aggregate of its children.

    ``num_descendants`` counts every entry below this folder and
    ``failed_to_read`` counts scan failures recorded under it.
    """

    name: str
    size: int = 0
    children: dict[str, "FileOrFolder"] = field(default_factory=dict)
    num_descendants: int = 0
    failed_to_read: int = 0

    def child_folder(self, name: str) -> Folder | None:
        """Return direct child ``name`` when it is a folder."""
        child = self.children.get(name)
        if isinstance(child, Folder):
            return child
        return None


FileOrFolder = File | Folder


__all__ = [
    "EntryMetadata",
    "File",
    "Folder",
    "FileOrFolder",
]
