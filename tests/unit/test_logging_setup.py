"""Logging bootstrap tests: opt-in file handler and idempotence."""

from __future__ import annotations

import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from hexviewer import logging_setup


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        logging_setup.reset()
        self.addCleanup(logging_setup.reset)

    def test_without_env_installs_null_handler_only(self) -> None:
        runtime = logging_setup.configure(environ={})

        handlers = logging.getLogger("hexviewer").handlers
        self.assertIsNone(runtime.file_path)
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.NullHandler)

    def test_log_file_env_enables_rotating_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "viewer.log"
            runtime = logging_setup.configure(
                environ={"HEXVIEWER_LOG_FILE": str(log_path), "HEXVIEWER_LOG_LEVEL": "debug"}
            )
            logging.getLogger("hexviewer.runtime.session").debug("relayout")
            logging_setup.reset()

            self.assertEqual(runtime.level, logging.DEBUG)
            self.assertEqual(runtime.level_name, "DEBUG")
            self.assertEqual(runtime.file_path, log_path)
            self.assertIn("relayout", log_path.read_text(encoding="utf-8"))

    def test_configure_is_idempotent(self) -> None:
        first = logging_setup.configure(environ={})
        second = logging_setup.configure(environ={"HEXVIEWER_LOG_LEVEL": "DEBUG"})

        self.assertIs(first, second)
        self.assertFalse(
            any(isinstance(handler, RotatingFileHandler) for handler in logging.getLogger("hexviewer").handlers)
        )

    def test_unknown_level_falls_back_to_info(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            runtime = logging_setup.configure(
                environ={"HEXVIEWER_LOG_FILE": str(Path(tmp) / "v.log"), "HEXVIEWER_LOG_LEVEL": "chatty"}
            )
            logging_setup.reset()

        self.assertEqual(runtime.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
