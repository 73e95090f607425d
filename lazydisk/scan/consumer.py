"""Consumer side of the scan protocol.

Instructions are applied on the UI thread only, in the order the scanner
queued them. The board is rebuilt only when an instruction touched the
directory currently on screen (or something below it, since that changes
child sizes); everything else updates the tree silently.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue
from typing import TYPE_CHECKING

from .instructions import EntryDiscovered, Instruction, ProgressTick, ReadFailed, ScanComplete

if TYPE_CHECKING:
    from ..runtime.app import App

DEFAULT_INSTRUCTION_BATCH = 2000


@dataclass(frozen=True)
class InstructionEffect:
    """What the UI has to do after one instruction was applied."""

    board_changed: bool = False
    needs_render: bool = False


NO_EFFECT = InstructionEffect()


def is_under_cursor(cursor: Sequence[str], path: Path, path_length: int) -> bool:
    """Return whether ``path`` lives in (or below) the directory named by ``cursor``."""
    parent = path.parts[path_length:-1]
    if len(parent) < len(cursor):
        return False
    return tuple(parent[: len(cursor)]) == tuple(cursor)


def apply_instruction(app: App, instruction: Instruction) -> InstructionEffect:
    """Apply one instruction to the app's tree and counters."""
    if isinstance(instruction, EntryDiscovered):
        app.add_entry_to_base_folder(instruction.metadata, instruction.path, instruction.path_length)
        visible = is_under_cursor(
            app.file_tree.current_folder_names,
            instruction.path,
            instruction.path_length,
        )
        return InstructionEffect(board_changed=visible, needs_render=visible)
    if isinstance(instruction, ReadFailed):
        app.increment_failed_to_read(instruction.path, instruction.path_length)
        return InstructionEffect(needs_render=True)
    if isinstance(instruction, ProgressTick):
        app.increment_loading_progress_indicator()
        return InstructionEffect(needs_render=True)
    if isinstance(instruction, ScanComplete):
        app.start_ui()
        return NO_EFFECT
    raise TypeError(f"unknown instruction: {instruction!r}")


def drain_instructions(
    app: App,
    instructions: Queue[Instruction],
    max_batch: int = DEFAULT_INSTRUCTION_BATCH,
) -> int:
    """Apply queued instructions without blocking and return how many ran.

    At most ``max_batch`` instructions are applied so input stays responsive.
    The batch ends with at most one board rebuild and one render.
    """
    board_changed = False
    needs_render = False
    applied = 0
    while applied < max_batch and app.is_running:
        try:
            instruction = instructions.get_nowait()
        except Empty:
            break
        effect = apply_instruction(app, instruction)
        applied += 1
        board_changed = board_changed or effect.board_changed
        needs_render = needs_render or effect.needs_render

    if board_changed:
        app.render_and_update_board()
    elif needs_render:
        app.render()
    return applied


def handle_instructions(
    app: App,
    instructions: Queue[Instruction],
    poll_seconds: float = 0.1,
) -> int:
    """Apply instructions as they arrive until the scan completes or the app stops.

    Each instruction is followed by its own rebuild or repaint. Returns how
    many instructions were applied.
    """
    applied = 0
    while app.is_running:
        try:
            instruction = instructions.get(timeout=poll_seconds)
        except Empty:
            continue
        effect = apply_instruction(app, instruction)
        applied += 1
        if effect.board_changed:
            app.render_and_update_board()
        elif effect.needs_render:
            app.render()
        if isinstance(instruction, ScanComplete):
            break
    return applied


__all__ = [
    "DEFAULT_INSTRUCTION_BATCH",
    "InstructionEffect",
    "apply_instruction",
    "drain_instructions",
    "handle_instructions",
    "is_under_cursor",
]
