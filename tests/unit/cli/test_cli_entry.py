from __future__ import annotations

import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from diffexplore import cli
from diffexplore.logs import DEBUG_LOG_ENV, configure_logging


class CliMainTests(unittest.TestCase):
    def test_main_runs_app_for_given_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(sys, "argv", ["diffexplore", tmp]), mock.patch(
                "diffexplore.cli.run_app"
            ) as run_app, mock.patch("diffexplore.cli.configure_logging") as configure:
                cli.main()

        run_app.assert_called_once_with(Path(tmp))
        configure.assert_called_once_with()

    def test_main_defaults_to_given_default_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(sys, "argv", ["diffexplore"]), mock.patch(
                "diffexplore.cli.run_app"
            ) as run_app, mock.patch("diffexplore.cli.configure_logging"):
                cli.main(default_path=Path(tmp))

        run_app.assert_called_once_with(Path(tmp))

    def test_main_rejects_missing_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = str(Path(tmp) / "missing")
            with mock.patch.object(sys, "argv", ["diffexplore", missing]), mock.patch(
                "diffexplore.cli.run_app"
            ) as run_app:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        self.assertIn("Path not found", str(ctx.exception.code))
        run_app.assert_not_called()


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("diffexplore")
        self.saved_handlers = list(self.logger.handlers)
        self.saved_level = self.logger.level

    def tearDown(self) -> None:
        for handler in self.logger.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        self.logger.handlers = self.saved_handlers
        self.logger.setLevel(self.saved_level)

    def test_disabled_without_environment_variable(self) -> None:
        self.assertFalse(configure_logging({}))
        self.assertEqual(self.logger.handlers, self.saved_handlers)

    def test_debug_log_file_receives_package_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "debug.log"

            self.assertTrue(configure_logging({DEBUG_LOG_ENV: str(log_path)}))
            logging.getLogger("diffexplore.git.query").debug("running %s", "git log")
            for handler in self.logger.handlers:
                handler.flush()
                if handler not in self.saved_handlers:
                    handler.close()
            self.logger.handlers = list(self.saved_handlers)

            self.assertIn("running git log", log_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
