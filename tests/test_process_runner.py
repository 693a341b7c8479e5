import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from gradepoint.services.process_runner import (
    ArtifactCopyError,
    ExecutableNotFoundError,
    ProcessRunnerError,
    build_fallbacks,
    copy_artifacts,
    resolve_test_target,
    run_with_fallbacks,
    split_command,
)

MISSING = "gradepoint-missing-executable-xyz"


class FallbackTests(unittest.TestCase):
    def test_preferred_first_and_deduplicated(self):
        result = build_fallbacks(["pytest", "PYTEST", " py.test ", ""], preferred="python -m pytest")
        self.assertEqual(result, ("python -m pytest", "pytest", "py.test"))

    def test_test_targets(self):
        self.assertEqual(resolve_test_target("Student"), "tests/test_student.py")
        self.assertEqual(resolve_test_target("classifier"), "tests/test_grades.py")
        self.assertEqual(resolve_test_target("tests/test_gpa.py"), "tests/test_gpa.py")


class SplitCommandTests(unittest.TestCase):
    def test_posix_split(self):
        self.assertEqual(split_command('"/opt/my python/bin/python" -m pytest', "linux"),
                         ("/opt/my python/bin/python", "-m", "pytest"))

    def test_windows_keeps_backslashes(self):
        self.assertEqual(split_command(r"C:\Python311\python.exe -m pytest", "win32"),
                         (r"C:\Python311\python.exe", "-m", "pytest"))

    def test_windows_strips_quotes(self):
        self.assertEqual(split_command(r'"C:\Program Files\Python\python.exe" -m pytest', "win32"),
                         (r"C:\Program Files\Python\python.exe", "-m", "pytest"))

    def test_unbalanced_quote_raises_runner_error(self):
        for platform in ("linux", "win32"):
            with self.subTest(platform=platform):
                with self.assertRaises(ProcessRunnerError):
                    split_command('"pytest', platform)


class RunWithFallbacksTests(unittest.TestCase):
    def test_unbalanced_quote_candidate_raises_runner_error(self):
        with mock.patch("subprocess.Popen") as popen:
            with self.assertRaises(ProcessRunnerError):
                run_with_fallbacks(['"pytest'], echo=lambda line: None)
        popen.assert_not_called()

    def test_missing_executable_falls_through(self):
        lines = []
        result = run_with_fallbacks(
            [MISSING, f'"{sys.executable}" -c "print(42)"'],
            echo=lines.append,
        )
        self.assertTrue(result.succeeded)
        self.assertEqual(lines, ["42"])
        self.assertEqual(result.command[0], sys.executable)

    def test_non_zero_exit_is_returned(self):
        result = run_with_fallbacks(
            [f'"{sys.executable}"'], ["-c", "import sys; sys.exit(3)"], echo=lambda line: None
        )
        self.assertEqual(result.exit_code, 3)
        self.assertFalse(result.succeeded)

    def test_all_missing_raises(self):
        with self.assertRaises(ExecutableNotFoundError):
            run_with_fallbacks([MISSING, MISSING + "-2"], echo=lambda line: None)

    def test_launch_failure_stops(self):
        with mock.patch("subprocess.Popen", side_effect=PermissionError("denied")) as popen:
            with self.assertRaises(ProcessRunnerError) as ctx:
                run_with_fallbacks(["first", "second"], echo=lambda line: None)
        self.assertNotIsInstance(ctx.exception, ExecutableNotFoundError)
        self.assertEqual(popen.call_count, 1)


class CopyArtifactsTests(unittest.TestCase):
    def test_copies_tree(self):
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp) / "htmlcov"
            (source / "nested").mkdir(parents=True)
            (source / "index.html").write_text("report")
            (source / "nested" / "a.html").write_text("a")
            destination = Path(tmp) / "build" / "artifacts"
            destination.mkdir(parents=True)
            (destination / "index.html").write_text("old")

            copy_artifacts(source, destination)

            self.assertEqual((destination / "index.html").read_text(), "report")
            self.assertTrue((destination / "nested" / "a.html").exists())

    def test_missing_source_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ArtifactCopyError):
                copy_artifacts(Path(tmp) / "nope", Path(tmp) / "out")


if __name__ == "__main__":
    unittest.main()
