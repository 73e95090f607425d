"""Incrementally built file tree with a name-based directory cursor.

The tree owns a single root ``Folder``; every other node is reachable only
through nested ``children`` maps. The cursor (``current_folder_names``) is a
list of names re-resolved against the root on each access, so structural
mutation never leaves a stale reference behind.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .types import EntryMetadata, File, FileOrFolder, Folder

if TYPE_CHECKING:
    from ..runtime.ui_mode import FileToDelete


class FileTree:
    """Mirror of the filesystem below ``path_in_filesystem``."""

    def __init__(self, path_in_filesystem: Path) -> None:
        self.path_in_filesystem = path_in_filesystem
        self.root = Folder(name=path_in_filesystem.name or str(path_in_filesystem))
        self.current_folder_names: list[str] = []
        self.failed_to_read = 0
        self.space_freed = 0
        # Paths removed by delete_file; scan results at or below them are dropped.
        self.deleted_paths: set[tuple[str, ...]] = set()

    def folder_at(self, names: Sequence[str]) -> Folder | None:
        """Resolve folder names from the root, ``None`` if any step is missing or a file."""
        folder = self.root
        for name in names:
            child = folder.child_folder(name)
            if child is None:
                return None
            folder = child
        return folder

    def get_current_folder(self) -> Folder:
        """Return the live folder the cursor points to."""
        folder = self.folder_at(self.current_folder_names)
        if folder is None:
            # Cursor named a removed folder; keep the deepest valid prefix.
            self._truncate_cursor()
            folder = self.folder_at(self.current_folder_names)
            assert folder is not None
        return folder

    def current_path(self) -> Path:
        """Return the filesystem path of the directory under the cursor."""
        return self.path_in_filesystem.joinpath(*self.current_folder_names)

    def _truncate_cursor(self) -> None:
        folder = self.root
        valid: list[str] = []
        for name in self.current_folder_names:
            child = folder.child_folder(name)
            if child is None:
                break
            valid.append(name)
            folder = child
        self.current_folder_names = valid

    def _is_deleted(self, components: Sequence[str]) -> bool:
        if not self.deleted_paths:
            return False
        return any(
            tuple(components[:depth]) in self.deleted_paths
            for depth in range(1, len(components) + 1)
        )

    def add_entry(self, metadata: EntryMetadata, path: Path, path_length: int) -> None:
        """Insert one scanned entry and propagate its size to every ancestor.

        ``path_length`` is the number of components of the scan root, so the
        entry's position below the root is ``path.parts[path_length:]``.
        Missing intermediate folders are created on the way down. Entries at or
        below a path removed by ``delete_file`` are ignored, since the scanner
        may have queued them before the removal.
        """
        components = path.parts[path_length:]
        if not components:
            return
        if self._is_deleted(components):
            return

        ancestors = [self.root]
        folder = self.root
        for name in components[:-1]:
            child = folder.children.get(name)
            if not isinstance(child, Folder):
                child = Folder(name=name)
                folder.children[name] = child
                for ancestor in ancestors:
                    ancestor.num_descendants += 1
            folder = child
            ancestors.append(folder)

        name = components[-1]
        if metadata.is_dir:
            if isinstance(folder.children.get(name), Folder):
                return
            node: FileOrFolder = Folder(name=name)
            size = 0
        else:
            node = File(name=name, size=metadata.size, mtime_ns=metadata.mtime_ns)
            size = metadata.size

        folder.children[name] = node
        for ancestor in ancestors:
            ancestor.size += size
            ancestor.num_descendants += 1

    def record_read_failure(self, path: Path | None, path_length: int) -> None:
        """Count one unreadable entry on the tree and on each known folder above it."""
        self.failed_to_read += 1
        self.root.failed_to_read += 1
        if path is None:
            return
        folder = self.root
        for name in path.parts[path_length:-1]:
            child = folder.child_folder(name)
            if child is None:
                return
            child.failed_to_read += 1
            folder = child

    def enter_folder(self, name: str) -> None:
        """Move the cursor into folder ``name`` of the current directory.

        Names that are missing or refer to files are ignored.
        """
        if self.get_current_folder().child_folder(name) is None:
            return
        self.current_folder_names.append(name)

    def leave_folder(self) -> bool:
        """Move the cursor to the parent directory; ``False`` when already at root."""
        if not self.current_folder_names:
            return False
        self.current_folder_names.pop()
        return True

    def item_in_current_folder(self, name: str) -> FileOrFolder | None:
        """Look up ``name`` among the children of the current directory."""
        return self.get_current_folder().children.get(name)

    def delete_file(self, file_to_delete: FileToDelete) -> int:
        """Remove an entry from the tree and subtract its size from its ancestors.

        Returns the number of bytes freed. Entries not present in the tree
        (not yet scanned, or already removed) leave the tree unchanged.
        """
        path_to_file = list(file_to_delete.path_to_file)
        if not path_to_file:
            return 0

        ancestors = [self.root]
        folder = self.root
        for name in path_to_file[:-1]:
            child = folder.child_folder(name)
            if child is None:
                return 0
            folder = child
            ancestors.append(folder)

        removed = folder.children.pop(path_to_file[-1], None)
        if removed is None:
            return 0

        removed_count = 1
        if isinstance(removed, Folder):
            removed_count += removed.num_descendants
        for ancestor in ancestors:
            ancestor.size -= removed.size
            ancestor.num_descendants -= removed_count

        self.space_freed += removed.size
        self.deleted_paths.add(tuple(path_to_file))
        self._truncate_cursor()
        return removed.size


__all__ = ["FileTree"]
