"""Tests for the git query gateway with ``subprocess.run`` mocked out."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from diffexplore.git.query import GitQueryGateway, resolve_repo_root
from diffexplore.git.types import ChangeKind, DiffOptions, GitQueryError


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> SimpleNamespace:
    return SimpleNamespace(stdout=stdout, stderr=stderr, returncode=returncode)


class GitQueryGatewayTests(unittest.TestCase):
    def setUp(self) -> None:
        self.root = Path("/repo")
        self.gateway = GitQueryGateway(self.root)

    def test_diff_stat_against_working_tree_passes_single_revision(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed("M\0a.py\0")) as run:
            entries = self.gateway.diff_stat("abc123", "")

        command = run.call_args.args[0]
        self.assertEqual(command[:4], ["git", "--literal-pathspecs", "-C", "/repo"])
        self.assertEqual(command[4], "diff")
        self.assertEqual(command[-1], "abc123")
        self.assertIn("--name-status", command)
        self.assertEqual(entries[0].change, ChangeKind.MODIFIED)

    def test_diff_stat_between_revisions_passes_both(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed("")) as run:
            self.assertEqual(self.gateway.diff_stat("old", "new"), [])

        self.assertEqual(run.call_args.args[0][-2:], ["old", "new"])

    def test_diff_limits_to_path_and_applies_options(self) -> None:
        gateway = GitQueryGateway(self.root, options=DiffOptions(context_lines=5, ignore_whitespace=True))
        output = "diff --git a/a.py b/a.py\n@@ -1 +1 @@\n-old\n+new\n"
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed(output)) as run:
            lines = gateway.diff("old", "", "a.py")

        command = run.call_args.args[0]
        self.assertEqual(command[-3:], ["old", "--", "a.py"])
        self.assertIn("--unified=5", command)
        self.assertIn("--ignore-all-space", command)
        self.assertEqual(lines, ["diff --git a/a.py b/a.py", "@@ -1 +1 @@", "-old", "+new"])

    def test_diff_for_rename_includes_old_path(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed("")) as run:
            self.gateway.diff("old", "new", "b.py", "a.py")

        self.assertEqual(run.call_args.args[0][-3:], ["--", "b.py", "a.py"])

    def test_nonzero_exit_raises_with_last_stderr_line(self) -> None:
        failed = _completed(returncode=128, stderr="warning: x\nfatal: bad revision 'nope'\n")
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=failed):
            with self.assertRaises(GitQueryError) as ctx:
                self.gateway.diff_stat("nope", "")

        self.assertIn("fatal: bad revision 'nope'", str(ctx.exception))

    def test_launch_failure_raises_query_error(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", side_effect=FileNotFoundError("git")):
            with self.assertRaises(GitQueryError):
                self.gateway.list_commits()

    def test_timeout_raises_query_error(self) -> None:
        timeout = subprocess.TimeoutExpired(cmd="git", timeout=1)
        with mock.patch("diffexplore.git.query.subprocess.run", side_effect=timeout):
            with self.assertRaises(GitQueryError):
                self.gateway.diff("a", "", "x.py")

    def test_list_commits_parses_log(self) -> None:
        output = "f" * 40 + "\x1fDev\x1f100\x1fSubject\x1ftag: refs/tags/v1\x1e\n"
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed(output)) as run:
            commits = self.gateway.list_commits()

        self.assertIn("--decorate=full", run.call_args.args[0])
        self.assertEqual(commits[0].subject, "Subject")
        self.assertEqual(commits[0].decoration, "tag: refs/tags/v1")


class ResolveRepoRootTests(unittest.TestCase):
    def test_returns_toplevel_on_success(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed("/work/repo\n")):
            self.assertEqual(resolve_repo_root(Path("/work/repo/src")), Path("/work/repo").resolve())

    def test_returns_none_outside_repo(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", return_value=_completed("", returncode=128)):
            self.assertIsNone(resolve_repo_root(Path("/tmp")))

    def test_returns_none_when_git_missing(self) -> None:
        with mock.patch("diffexplore.git.query.subprocess.run", side_effect=OSError("no git")):
            self.assertIsNone(resolve_repo_root(Path("/tmp")))


if __name__ == "__main__":
    unittest.main()
