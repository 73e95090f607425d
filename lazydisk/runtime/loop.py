"""Main interactive event loop for the terminal UI.

Interleaves three sources of work on a single thread: terminal resizes,
queued scan instructions, and decoded key presses. All tree and board
mutation therefore happens here, without locks.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass
from queue import Queue

from ..input import decode_key, read_key
from ..scan import DEFAULT_INSTRUCTION_BATCH, Instruction, drain_instructions
from .app import App
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 100
    instruction_batch: int = DEFAULT_INSTRUCTION_BATCH


def run_main_loop(
    app: App,
    instructions: Queue[Instruction],
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    read_key_fn: Callable[[int, int | None], str] = read_key,
) -> None:
    """Run the interactive loop until the app stops running.

    When a full batch of instructions was applied the key read does not
    wait, so a fast scan drains quickly while input stays responsive.
    """
    with terminal.raw_mode():
        app.render()
        while app.is_running:
            term = shutil.get_terminal_size((80, 24))
            app.resize(term.columns, term.lines)

            applied = drain_instructions(app, instructions, timing.instruction_batch)
            app.tick()
            if not app.is_running:
                break

            timeout_ms = 0 if applied >= timing.instruction_batch else timing.key_timeout_ms
            try:
                key = read_key_fn(stdin_fd, timeout_ms)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                continue

            command = decode_key(key, app.ui_mode)
            if command is not None:
                app.handle_command(command)


__all__ = ["RuntimeLoopTiming", "run_main_loop"]
