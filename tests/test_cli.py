"""End-to-end tests for the Typer CLI."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from git_open_link.cli import app
from git_open_link.models import BranchRef


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / ".git").mkdir()
        self.config = self.root / ".git" / "config"
        self.config.write_text('[remote "origin"]\n\turl = git@github.com:acme/widgets.git\n', encoding="utf-8")
        (self.root / "src").mkdir()
        self.file = self.root / "src" / "app.ts"
        self.file.write_text("export {};\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _invoke(self, *args: str):
        return self.runner.invoke(app, [*args, "--repo", str(self.root), "--print"])

    def test_main_prints_link_with_range(self) -> None:
        result = self._invoke("main", f"{self.file}:10-15")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("git@github.com:acme/widgets/blob/main/src/app.ts#L10-#L15", result.output)

    def test_current_uses_checked_out_branch(self) -> None:
        with mock.patch("git_open_link.commands.current_branch", return_value=BranchRef("feature/x")):
            result = self._invoke("current", str(self.file), "--line", "7")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("git@github.com:acme/widgets/blob/feature/x/src/app.ts#L7", result.output)

    def test_lines_option_overrides_suffix(self) -> None:
        result = self._invoke("main", f"{self.file}:1", "--lines", "4-5")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("#L4-#L5", result.output)

    def test_missing_remote_exits_with_message(self) -> None:
        self.config.write_text("[core]\n", encoding="utf-8")

        result = self._invoke("main", str(self.file))

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Git origin not found.", result.output)

    def test_missing_file_is_rejected(self) -> None:
        result = self._invoke("main", str(self.root / "nope.ts"))

        self.assertEqual(result.exit_code, 1)
        self.assertIn("File not found", result.output)

    def test_bad_range_is_rejected(self) -> None:
        result = self._invoke("main", str(self.file), "--lines", "9-2")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("before start", result.output)

    def test_opens_browser_without_print(self) -> None:
        with mock.patch("git_open_link.browser.webbrowser.open", return_value=True) as browser_open:
            result = self.runner.invoke(app, ["main", str(self.file), "--repo", str(self.root)])

        self.assertEqual(result.exit_code, 0, result.output)
        browser_open.assert_called_once_with("git@github.com:acme/widgets/blob/main/src/app.ts#L1")
        self.assertIn("Opened", result.output)

    def test_long_link_is_not_wrapped(self) -> None:
        remote = "https://example.com/" + "a" * 150 + "/repo.git"
        self.config.write_text(f'[remote "origin"]\n\turl = {remote}\n', encoding="utf-8")
        expected = "https://example.com/" + "a" * 150 + "/repo/blob/main/src/app.ts#L3-#L9"

        with mock.patch("git_open_link.browser.webbrowser.open", return_value=True):
            result = self.runner.invoke(
                app, ["main", str(self.file), "--lines", "3-9", "--repo", str(self.root)]
            )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(f"Opened {expected}\n", result.output)

    def test_cursor_line_gives_single_anchor(self) -> None:
        result = self._invoke("main", str(self.file), "-l", "12")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("git@github.com:acme/widgets/blob/main/src/app.ts#L12\n", result.output)

    def test_version(self) -> None:
        result = self.runner.invoke(app, ["--version"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("git-open-link", result.output)


if __name__ == "__main__":
    unittest.main()
