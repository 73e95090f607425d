"""Mode-aware translation of key tokens into commands."""

from __future__ import annotations

from ..runtime.ui_mode import DeleteFile, ErrorMessage, Loading, Normal, ScreenTooSmall, UiMode
from ..treemap import Direction
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

EXIT_KEYS = ("q", "CTRL_C")


def _browse_registry() -> KeyComboRegistry[Command]:
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("UP", "k"), lambda: MoveSelection(Direction.UP)),
        KeyComboBinding(("DOWN", "j"), lambda: MoveSelection(Direction.DOWN)),
        KeyComboBinding(("LEFT", "h"), lambda: MoveSelection(Direction.LEFT)),
        KeyComboBinding(("RIGHT", "l"), lambda: MoveSelection(Direction.RIGHT)),
        KeyComboBinding(("ENTER",), Enter),
        KeyComboBinding(("BACKSPACE", "ESC"), Leave),
        KeyComboBinding(("CTRL_D",), PromptDelete),
        KeyComboBinding(EXIT_KEYS, Exit),
    )


def _delete_prompt_registry() -> KeyComboRegistry[Command]:
    return KeyComboRegistry(normalize=str.lower).register_bindings(
        KeyComboBinding(("y",), ConfirmDelete),
        KeyComboBinding(("n", "esc"), CancelDelete),
        KeyComboBinding(("ctrl_c",), Exit),
    )


def _exit_only_registry() -> KeyComboRegistry[Command]:
    return KeyComboRegistry().register_bindings(KeyComboBinding(EXIT_KEYS, Exit))


_BROWSE_KEYS = _browse_registry()
_DELETE_PROMPT_KEYS = _delete_prompt_registry()
_EXIT_ONLY_KEYS = _exit_only_registry()


def decode_key(key: str, ui_mode: UiMode) -> Command | None:
    """Return the command ``key`` means in ``ui_mode``, or ``None`` when unbound."""
    if not key:
        return None
    if isinstance(ui_mode, (Loading, Normal)):
        return _BROWSE_KEYS.dispatch(key)
    if isinstance(ui_mode, DeleteFile):
        return _DELETE_PROMPT_KEYS.dispatch(key)
    if isinstance(ui_mode, ErrorMessage):
        command = _EXIT_ONLY_KEYS.dispatch(key)
        return command if command is not None else ResetUiMode()
    if isinstance(ui_mode, ScreenTooSmall):
        return _EXIT_ONLY_KEYS.dispatch(key)
    raise TypeError(f"unknown ui mode: {ui_mode!r}")


__all__ = ["EXIT_KEYS", "decode_key"]
