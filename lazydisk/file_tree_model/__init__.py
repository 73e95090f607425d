"""Domain model for the scanned file tree.

This package contains non-UI tree primitives:
- file/folder node datatypes (a ``File | Folder`` union)
- the incrementally built ``FileTree`` with its directory cursor
- stat and removal helpers at the filesystem boundary
"""

from __future__ import annotations

from .types import EntryMetadata, File, FileOrFolder, Folder
from .fs import BLOCK_SIZE_BYTES, entry_metadata_from_stat, remove_path, safe_entry_metadata
from .tree import FileTree

__all__ = [
    "EntryMetadata",
    "File",
    "Folder",
    "FileOrFolder",
    "FileTree",
    "BLOCK_SIZE_BYTES",
    "entry_metadata_from_stat",
    "safe_entry_metadata",
    "remove_path",
]
