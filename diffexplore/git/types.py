"""Immutable records produced by git queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChangeKind(str, Enum):
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"

    @property
    def letter(self) -> str:
        """Single-letter status code shown in the changed-file list."""
        return _CHANGE_LETTERS[self]

    @classmethod
    def from_status(cls, status: str) -> ChangeKind:
        """Map a ``git diff --name-status`` code (``A``, ``R100``, ...) to a kind."""
        code = status[:1].upper()
        if code == "A":
            return cls.ADDED
        if code == "D":
            return cls.DELETED
        if code == "R":
            return cls.RENAMED
        return cls.MODIFIED


_CHANGE_LETTERS = {
    ChangeKind.ADDED: "A",
    ChangeKind.DELETED: "D",
    ChangeKind.MODIFIED: "M",
    ChangeKind.RENAMED: "R",
}


@dataclass(frozen=True)
class Commit:
    """One ``git log`` entry; ``decoration`` is the raw ``%D`` ref list."""

    revision: str
    author_name: str
    timestamp: int
    subject: str
    decoration: str = ""

    @property
    def short_revision(self) -> str:
        return self.revision[:8]


@dataclass(frozen=True)
class StatEntry:
    """One changed path in a commit range; ``old_path`` is set only for renames."""

    path: str
    change: ChangeKind
    old_path: str = ""


@dataclass(frozen=True)
class Decoration:
    branches: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    refs: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiffOptions:
    """Flags forwarded to every ``git diff`` invocation."""

    context_lines: int = 3
    ignore_whitespace: bool = False

    def to_args(self) -> list[str]:
        args = [f"--unified={max(0, self.context_lines)}"]
        if self.ignore_whitespace:
            args.append("--ignore-all-space")
        return args


DIFF_LINE_ADDED = "added"
DIFF_LINE_REMOVED = "removed"
DIFF_LINE_HUNK = "hunk"
DIFF_LINE_CONTEXT = "context"


def classify_diff_line(line: str) -> str:
    """Classify one unified-diff line by its leading character."""
    if line.startswith("+"):
        return DIFF_LINE_ADDED
    if line.startswith("-"):
        return DIFF_LINE_REMOVED
    if line.startswith("@"):
        return DIFF_LINE_HUNK
    return DIFF_LINE_CONTEXT


class GitQueryError(RuntimeError):
    """Raised when a git invocation fails or produces unusable output."""
