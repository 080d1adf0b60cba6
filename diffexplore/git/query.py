"""Git-backed query gateway for commits, diff stats and per-file diffs.

Every call shells out to ``git --literal-pathspecs -C <repo>`` once and parses
plain text output, so file paths never act as globs or pathspec magic.
Failures surface as ``GitQueryError``; callers decide whether they are fatal.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .types import ChangeKind, Commit, DiffOptions, GitQueryError, StatEntry

logger = logging.getLogger(__name__)

GIT_QUERY_TIMEOUT_SECONDS = 30.0
_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"
_LOG_FORMAT = "--format=%H%x1f%an%x1f%at%x1f%s%x1f%D%x1e"


def resolve_repo_root(path: Path, timeout_seconds: float = 2.0) -> Path | None:
    """Return the working-tree root containing ``path``, or ``None`` outside a repo."""
    try:
        proc = subprocess.run(
            ["git", "-C", str(path), "rev-parse", "--show-toplevel"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    if not top:
        return None
    return Path(top).resolve()


def parse_log_output(output: str) -> list[Commit]:
    """Parse ``git log`` output produced with the gateway's record format."""
    commits: list[Commit] = []
    for record in output.split(_RECORD_SEP):
        record = record.strip("\n")
        if not record:
            continue
        fields = record.split(_FIELD_SEP)
        if len(fields) < 5:
            logger.debug("skipping malformed log record: %r", record)
            continue
        revision, author_name, timestamp_text, subject, decoration = fields[:5]
        try:
            timestamp = int(timestamp_text)
        except ValueError:
            timestamp = 0
        commits.append(
            Commit(
                revision=revision,
                author_name=author_name,
                timestamp=timestamp,
                subject=subject,
                decoration=decoration,
            )
        )
    return commits


def parse_name_status(output: str) -> list[StatEntry]:
    """Parse ``git diff --name-status -z`` output.

    Rename and copy records carry two path tokens (source, destination); every
    other record carries one.
    """
    entries: list[StatEntry] = []
    tokens = output.split("\0")
    if tokens and not tokens[-1]:
        tokens.pop()
    index = 0
    while index < len(tokens):
        status = tokens[index].strip()
        index += 1
        if not status:
            continue
        if status[0] in {"R", "C"}:
            if index + 1 >= len(tokens):
                break
            old_path, path = tokens[index], tokens[index + 1]
            index += 2
            if status[0] == "C":
                entries.append(StatEntry(path=path, change=ChangeKind.ADDED))
            else:
                entries.append(StatEntry(path=path, change=ChangeKind.RENAMED, old_path=old_path))
            continue
        if index >= len(tokens):
            break
        path = tokens[index]
        index += 1
        entries.append(StatEntry(path=path, change=ChangeKind.from_status(status)))
    return entries


def _revision_args(start: str, end: str) -> list[str]:
    return [start] if not end else [start, end]


class GitQueryGateway:
    """Synchronous git queries scoped to one repository root."""

    def __init__(
        self,
        repo_root: Path,
        options: DiffOptions | None = None,
        timeout_seconds: float = GIT_QUERY_TIMEOUT_SECONDS,
    ) -> None:
        self.repo_root = repo_root
        self.options = options if options is not None else DiffOptions()
        self.timeout_seconds = timeout_seconds

    def _run_git(self, args: list[str]) -> str:
        command = ["git", "--literal-pathspecs", "-C", str(self.repo_root), *args]
        logger.debug("running %s", command)
        try:
            proc = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self.timeout_seconds,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise GitQueryError(f"git {args[0]} failed: {exc}") from exc
        if proc.returncode != 0:
            detail = proc.stderr.strip().splitlines()
            message = detail[-1] if detail else f"exit status {proc.returncode}"
            raise GitQueryError(f"git {args[0]} failed: {message}")
        return proc.stdout

    def list_commits(self) -> list[Commit]:
        """Return all commits reachable from HEAD, most recent first."""
        output = self._run_git(["log", "--decorate=full", _LOG_FORMAT])
        return parse_log_output(output)

    def diff_stat(self, start: str, end: str) -> list[StatEntry]:
        """Return changed paths between ``start`` and ``end`` (``""`` = working tree)."""
        output = self._run_git(
            ["diff", "--no-color", "--no-ext-diff", "--name-status", "-z", "-M", *_revision_args(start, end)]
        )
        return parse_name_status(output)

    def diff(self, start: str, end: str, path: str, old_path: str = "") -> list[str]:
        """Return unified diff lines for one file of the range."""
        pathspecs = [path] if not old_path else [path, old_path]
        output = self._run_git(
            [
                "diff",
                "--no-color",
                "--no-ext-diff",
                "-M",
                *self.options.to_args(),
                *_revision_args(start, end),
                "--",
                *pathspecs,
            ]
        )
        return output.splitlines()
