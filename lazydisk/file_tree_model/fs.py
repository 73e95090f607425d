"""Filesystem stat and removal helpers for the file-tree model."""

from __future__ import annotations

import os
import shutil
import stat as stat_module
from pathlib import Path

from send2trash import send2trash

from .types import EntryMetadata

BLOCK_SIZE_BYTES = 512


def entry_metadata_from_stat(
    stat_result: os.stat_result,
    is_dir: bool,
    apparent_size: bool = False,
) -> EntryMetadata:
    """Convert a stat result into scanner metadata.

    Directories report size ``0``; their size is the sum of what lives below
    them. Files report allocated size (``st_blocks * 512``) unless
    ``apparent_size`` is set or the platform has no block count.
    """
    mtime_ns = int(stat_result.st_mtime_ns)
    if is_dir:
        return EntryMetadata(is_dir=True, size=0, mtime_ns=mtime_ns)
    blocks = getattr(stat_result, "st_blocks", None)
    if apparent_size or blocks is None:
        size = int(stat_result.st_size)
    else:
        size = int(blocks) * BLOCK_SIZE_BYTES
    return EntryMetadata(is_dir=False, size=max(0, size), mtime_ns=mtime_ns)


def safe_entry_metadata(path: Path, apparent_size: bool = False) -> EntryMetadata | None:
    """Return metadata for ``path`` without following symlinks, ``None`` on stat failure."""
    try:
        stat_result = path.lstat()
    except OSError:
        return None
    return entry_metadata_from_stat(
        stat_result,
        is_dir=stat_module.S_ISDIR(stat_result.st_mode),
        apparent_size=apparent_size,
    )


def remove_path(path: Path, use_trash: bool = False) -> None:
    """Remove ``path`` from disk, recursing into directories.

    Symlinks are removed as links, never followed. Errors propagate as
    ``OSError`` so callers decide how to surface them.
    """
    if use_trash:
        send2trash(str(path))
        return
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return
    os.remove(path)


__all__ = [
    "BLOCK_SIZE_BYTES",
    "entry_metadata_from_stat",
    "safe_entry_metadata",
    "remove_path",
]
