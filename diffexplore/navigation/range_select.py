"""Commit-range derivation from the commit list's cursor and mark."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..git.types import Commit
from .list_model import NO_INDEX, WindowedListModel

WORKING_TREE = ""
WORKING_TREE_LABEL = "<index>"


@dataclass(frozen=True)
class CommitRange:
    """Ordered ``start..end`` revision pair; empty ``end`` means working tree."""

    start: str
    end: str = WORKING_TREE

    @property
    def open_ended(self) -> bool:
        return self.end == WORKING_TREE

    def label(self) -> str:
        end = WORKING_TREE_LABEL if self.open_ended else self.end[:8]
        return f"{self.start[:8]}..{end}"


def select_commit_range(commits: Sequence[Commit], model: WindowedListModel) -> CommitRange:
    """Derive the query range for the cursor row and optional mark.

    ``commits`` is most recent first, so the larger list index is the older
    revision and always becomes ``start``. Which end was marked first does not
    matter.
    """
    cursor_commit = commits[model.cursor]
    if model.marked == NO_INDEX:
        return CommitRange(start=cursor_commit.revision)
    older = max(model.cursor, model.marked)
    newer = min(model.cursor, model.marked)
    return CommitRange(start=commits[older].revision, end=commits[newer].revision)
