from __future__ import annotations

import unittest
from unittest import mock

from lazydisk.runtime.terminal import TerminalController


class TerminalControllerTests(unittest.TestCase):
    def test_raw_mode_restores_terminal_after_error(self) -> None:
        with (
            mock.patch("lazydisk.runtime.terminal.termios") as termios,
            mock.patch("lazydisk.runtime.terminal.tty") as tty,
            mock.patch("lazydisk.runtime.terminal.os.write") as write,
        ):
            termios.tcgetattr.return_value = ["saved"]
            controller = TerminalController(5, 6)

            with self.assertRaises(ValueError):
                with controller.raw_mode():
                    raise ValueError("boom")

        tty.setraw.assert_called_once()
        termios.tcsetattr.assert_called_once_with(5, termios.TCSAFLUSH, ["saved"])
        written = b"".join(call.args[1] for call in write.call_args_list)
        self.assertIn(b"\x1b[?1049h", written)
        self.assertTrue(written.endswith(b"\x1b[?1049l"))


if __name__ == "__main__":
    unittest.main()
