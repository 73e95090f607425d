"""Abstract user commands produced by key decoding."""

from __future__ import annotations

from dataclasses import dataclass

from ..treemap import Direction


@dataclass(frozen=True)
class MoveSelection:
    direction: Direction


@dataclass(frozen=True)
class Enter:
    pass


@dataclass(frozen=True)
class Leave:
    pass


@dataclass(frozen=True)
class PromptDelete:
    pass


@dataclass(frozen=True)
class ConfirmDelete:
    pass


@dataclass(frozen=True)
class CancelDelete:
    pass


@dataclass(frozen=True)
class ResetUiMode:
    """Dismiss an error message."""


@dataclass(frozen=True)
class Exit:
    pass


Command = MoveSelection | Enter | Leave | PromptDelete | ConfirmDelete | CancelDelete | ResetUiMode | Exit


__all__ = [
    "MoveSelection",
    "Enter",
    "Leave",
    "PromptDelete",
    "ConfirmDelete",
    "CancelDelete",
    "ResetUiMode",
    "Exit",
    "Command",
]
