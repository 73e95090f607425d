"""Lifecycle events the app reports to the rest of the program."""

from __future__ import annotations

from enum import Enum


class AppEvent(Enum):
    PATH_CHANGE = "path_change"
    # Leaving the root directory was attempted.
    PATH_ERROR = "path_error"
    FILE_DELETED = "file_deleted"
    APP_EXIT = "app_exit"


__all__ = ["AppEvent"]
