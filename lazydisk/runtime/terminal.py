"""Raw-mode and alternate-screen handling for the treemap session.

The terminal state captured at construction is restored on exit, even when
the session ends with an exception.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty


class TerminalController:
    """Switch a tty in and out of the full-screen treemap view."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l\x1b[2J")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen buffer and the saved tty state."""
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the enclosed block in full-screen raw mode."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
