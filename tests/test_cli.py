"""End-to-end tests for the Typer CLI."""

from __future__ import annotations

import re
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest import mock

from git import Repo
from gitrepo import RepoBuilder
from typer.testing import CliRunner

from git_branch_age import __version__
from git_branch_age.cli import app

GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
ORANGE = "\x1b[38;2;255;128;0m"
RED = "\x1b[31m"
ANSI = re.compile(r"\x1b\[[0-9;]*m")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        now = datetime.now(timezone.utc)
        builder = RepoBuilder(self.root)
        builder.commit("Old experiment", now - timedelta(days=200))
        builder.rename_current("main")
        builder.branch("old-feature")
        builder.commit("Middle work", now - timedelta(days=90))
        builder.branch("quarter")
        builder.commit("Recent-ish", now - timedelta(days=20))
        builder.branch("sprint")
        builder.commit("Today\n\nDetails nobody reads", now - timedelta(minutes=1))
        builder.close()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _line_for(self, output: str, branch: str) -> str:
        for line in output.splitlines():
            if ANSI.sub("", line).split("\t", 1)[0].rstrip() == branch:
                return line
        self.fail(f"no output line for {branch!r}:\n{output}")

    def test_colors_each_branch_by_freshness(self) -> None:
        result = self.runner.invoke(app, [str(self.root)], color=True)

        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.stdout.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(self._line_for(result.stdout, "main").startswith(GREEN))
        self.assertTrue(self._line_for(result.stdout, "sprint").startswith(YELLOW))
        self.assertTrue(self._line_for(result.stdout, "quarter").startswith(ORANGE))
        self.assertTrue(self._line_for(result.stdout, "old-feature").startswith(RED))
        self.assertIn("\tToday\x1b[0m", self._line_for(result.stdout, "main"))

    def test_plain_output_without_color(self) -> None:
        result = self.runner.invoke(app, [str(self.root)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("\x1b[", result.stdout)
        main_line = next(line for line in result.stdout.splitlines() if line.startswith("main "))
        name_field, stamp, message = main_line.split("\t")
        self.assertEqual(name_field, "main".ljust(32))
        self.assertRegex(stamp, r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")
        self.assertEqual(message, "Today")

    def test_unresolvable_branch_is_skipped_with_warning(self) -> None:
        builder = RepoBuilder(self.root)
        builder.dangling_branch("broken")
        builder.close()

        result = self.runner.invoke(app, [str(self.root)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(len(result.stdout.splitlines()), 4)
        self.assertNotIn("broken", result.stdout)
        warnings = result.stderr.splitlines()
        self.assertEqual(len(warnings), 1, result.stderr)
        self.assertTrue(warnings[0].startswith("WARNING: could not retrieve reference for broken: "))

    def test_rebased_commit_is_dated_by_author(self) -> None:
        builder = RepoBuilder(self.root)
        builder.repo.create_head("rebased").checkout()
        authored = datetime.now(timezone.utc) - timedelta(days=200)
        builder.commit("Rebased old work", authored, committed=datetime.now(timezone.utc))
        builder.close()

        result = self.runner.invoke(app, [str(self.root)], color=True)

        self.assertEqual(result.exit_code, 0, result.output)
        line = self._line_for(result.stdout, "rebased")
        self.assertTrue(line.startswith(RED), line)
        self.assertIn(f"\t{authored:%Y-%m-%d %H:%M}\t", line)

    def test_branch_listing_failure_is_fatal(self) -> None:
        with mock.patch.object(
            Repo, "branches", new_callable=mock.PropertyMock, side_effect=OSError("packed-refs unreadable")
        ):
            result = self.runner.invoke(app, [str(self.root)])

        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.stdout, "")
        self.assertIn("could not retrieve branches", result.stderr)

    def test_missing_argument(self) -> None:
        result = self.runner.invoke(app, [])
        self.assertNotEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "")

    def test_too_many_arguments(self) -> None:
        result = self.runner.invoke(app, [str(self.root), str(self.root)])
        self.assertNotEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "")

    def test_not_a_repository(self) -> None:
        with tempfile.TemporaryDirectory() as other:
            result = self.runner.invoke(app, [other])
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.stdout, "")
        self.assertIn("could not open repo", result.stderr)

    def test_version(self) -> None:
        result = self.runner.invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.stdout)


if __name__ == "__main__":
    unittest.main()
