from __future__ import annotations

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazydisk import logs


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        package_logger = logging.getLogger("lazydisk")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.propagate = True

    def test_level_resolution_prefers_argument_then_environment(self) -> None:
        with mock.patch.dict(os.environ, {logs.LOG_LEVEL_ENV: "debug"}):
            self.assertEqual(logs.resolve_log_level("error"), logging.ERROR)
            self.assertEqual(logs.resolve_log_level(None), logging.DEBUG)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(logs.resolve_log_level(None), logging.WARNING)
            self.assertEqual(logs.resolve_log_level("nonsense"), logging.WARNING)

    def test_records_go_to_the_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "nested" / "lazydisk.log"

            returned = logs.configure_logging(logging.INFO, log_path)
            logging.getLogger("lazydisk.scan.scanner").info("scanned %d entries", 3)
            for handler in logging.getLogger("lazydisk").handlers:
                handler.flush()

            self.assertEqual(returned, log_path)
            self.assertIn("scanned 3 entries", log_path.read_text(encoding="utf-8"))

    def test_unwritable_log_directory_falls_back_to_null_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")

            returned = logs.configure_logging(logging.INFO, blocker / "sub" / "lazydisk.log")

        self.assertIsNone(returned)
        handlers = logging.getLogger("lazydisk").handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.NullHandler)


if __name__ == "__main__":
    unittest.main()
