"""Input-layer public API: terminal key decoding and key-to-command mapping.

Exports are split between low-level terminal decoding (`read_key`) and the
mode-aware translation into abstract commands (`decode_key`).
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key
from .commands import (
    CancelDelete,
    Command,
    ConfirmDelete,
    Enter,
    Exit,
    Leave,
    MoveSelection,
    PromptDelete,
    ResetUiMode,
)
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import EXIT_KEYS, decode_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "Command",
    "MoveSelection",
    "Enter",
    "Leave",
    "PromptDelete",
    "ConfirmDelete",
    "CancelDelete",
    "ResetUiMode",
    "Exit",
    "KeyComboBinding",
    "KeyComboRegistry",
    "EXIT_KEYS",
    "decode_key",
]
