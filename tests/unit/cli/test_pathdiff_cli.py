"""CLI argument handling and exit-status tests.

Verifies how ``pathdiff.cli.main`` maps usage and comparison outcomes onto
output and process exit codes.
"""

from __future__ import annotations

import io
import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pathdiff import cli
from pathdiff.ui_theme import DEFAULT_THEME


class CliUsageTests(unittest.TestCase):
    def test_help_flag_prints_usage_and_exits_successfully(self) -> None:
        for flag in ("-h", "--help"):
            with self.subTest(flag=flag):
                stdout = io.StringIO()
                with (
                    mock.patch.object(sys, "argv", ["pathdiff", flag]),
                    mock.patch("sys.stdout", stdout),
                    mock.patch("pathdiff.cli.ComparisonScheduler") as scheduler,
                ):
                    with self.assertRaises(SystemExit) as exc_info:
                        cli.main()

                self.assertEqual(exc_info.exception.code, 0)
                self.assertIn("usage: pathdiff [flags] path1 path2", stdout.getvalue())
                self.assertIn("--recursive", stdout.getvalue())
                scheduler.assert_not_called()

    def test_wrong_path_count_behaves_like_help(self) -> None:
        for argv in (["pathdiff"], ["pathdiff", "one"], ["pathdiff", "a", "b", "c"]):
            with self.subTest(argv=argv):
                stdout = io.StringIO()
                with (
                    mock.patch.object(sys, "argv", argv),
                    mock.patch("sys.stdout", stdout),
                    mock.patch("pathdiff.cli.ComparisonScheduler") as scheduler,
                ):
                    cli.main()

                self.assertIn("usage: pathdiff", stdout.getvalue())
                scheduler.assert_not_called()


class CliComparisonTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        config_patch = mock.patch("pathdiff.config.CONFIG_PATH", self.root / "missing-config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run_main(self, *args: str) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(list(args))
        return stdout.getvalue()

    def test_differing_files_print_report_and_return(self) -> None:
        (self.root / "a").write_bytes(b"one")
        (self.root / "b").write_bytes(b"two")

        output = self._run_main(str(self.root / "a"), str(self.root / "b"))

        self.assertEqual(output, f"Files {self.root / 'a'} and {self.root / 'b'} differ\n")

    def test_recursive_flag_descends_into_common_subdirectories(self) -> None:
        for side in ("left", "right"):
            (self.root / side / "sub").mkdir(parents=True)
            (self.root / side / "sub" / "f.txt").write_text(side, encoding="utf-8")
        left = str(self.root / "left")
        right = str(self.root / "right")

        shallow = self._run_main(left, right)
        deep = self._run_main("-r", left, right)
        deep_long = self._run_main(left, right, "--recursive")

        self.assertEqual(shallow, f"Common subdirectories: {left}/sub and {right}/sub\n")
        self.assertEqual(deep, f"Files {left}/sub/f.txt and {right}/sub/f.txt differ\n")
        self.assertEqual(deep_long, deep)

    def test_file_against_directory_prints_message_and_exits_one(self) -> None:
        (self.root / "file").write_bytes(b"")
        (self.root / "dir").mkdir()
        stdout = io.StringIO()

        with (
            mock.patch("sys.stdout", stdout),
            mock.patch("pathdiff.compare.scheduler.files_equal") as files_equal,
        ):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main([str(self.root / "file"), str(self.root / "dir")])

        self.assertEqual(exc_info.exception.code, cli.EXIT_MIXED_TYPES)
        self.assertEqual(stdout.getvalue(), "Cannot compare between a file and a directory.\n")
        files_equal.assert_not_called()

    def test_io_fault_is_logged_and_exits_with_fault_status(self) -> None:
        (self.root / "a").write_bytes(b"")
        stderr = io.StringIO()

        with mock.patch("pathdiff.log.sys.stderr", stderr):
            with self.assertRaises(SystemExit) as exc_info:
                self._run_main(str(self.root / "a"), str(self.root / "missing"))

        self.assertEqual(exc_info.exception.code, cli.EXIT_FAULT)
        self.assertNotEqual(cli.EXIT_FAULT, 2)
        self.assertIn("pathdiff: error:", stderr.getvalue())
        self.assertIn("missing", stderr.getvalue())

    def test_non_io_task_failure_is_logged_and_exits_with_fault_status(self) -> None:
        for side in ("left", "right"):
            (self.root / side).mkdir()
            (self.root / side / "f.txt").write_text(side, encoding="utf-8")
        stderr = io.StringIO()

        with (
            mock.patch("pathdiff.log.sys.stderr", stderr),
            mock.patch("pathdiff.compare.scheduler.files_equal", side_effect=MemoryError()),
        ):
            with self.assertRaises(SystemExit) as exc_info:
                self._run_main(str(self.root / "left"), str(self.root / "right"))

        self.assertEqual(exc_info.exception.code, cli.EXIT_FAULT)
        self.assertIn("pathdiff: error: internal fault: MemoryError()", stderr.getvalue())

    def test_color_is_disabled_when_stdout_is_not_a_tty(self) -> None:
        (self.root / "a").write_bytes(b"one")
        (self.root / "b").write_bytes(b"two")

        output = self._run_main(str(self.root / "a"), str(self.root / "b"))

        self.assertNotIn("\033", output)

    def test_tty_output_uses_theme_unless_no_color(self) -> None:
        (self.root / "a").write_bytes(b"one")
        (self.root / "b").write_bytes(b"two")
        args = (str(self.root / "a"), str(self.root / "b"))

        with mock.patch("pathdiff.cli._stdout_is_tty", return_value=True):
            colored = self._run_main(*args)
            plain = self._run_main("--no-color", *args)

        self.assertIn(f"{DEFAULT_THEME.differ}differ{DEFAULT_THEME.reset}", colored)
        self.assertNotIn("\033", plain)

    def test_config_no_color_disables_tty_colors(self) -> None:
        (self.root / "a").write_bytes(b"one")
        (self.root / "b").write_bytes(b"two")
        config_path = self.root / "config.json"
        config_path.write_text('{"no_color": true}', encoding="utf-8")

        with (
            mock.patch("pathdiff.config.CONFIG_PATH", config_path),
            mock.patch("pathdiff.cli._stdout_is_tty", return_value=True),
        ):
            output = self._run_main(str(self.root / "a"), str(self.root / "b"))

        self.assertNotIn("\033", output)

    def test_verbose_flag_enables_debug_logging(self) -> None:
        (self.root / "a").write_bytes(b"same")
        (self.root / "b").write_bytes(b"same")
        stderr = io.StringIO()

        with mock.patch("pathdiff.log.sys.stderr", stderr):
            self._run_main("-v", str(self.root / "a"), str(self.root / "b"))

        self.assertEqual(logging.getLogger("pathdiff").level, logging.DEBUG)
        self.assertIn("pathdiff: debug: comparing files", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
