"""Screen records and the push/pop stack that orders them.

Each screen owns its data and its own list model; popping a screen discards
both. The root commits screen is never popped: ``back`` reports that the
caller should terminate instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from ..git.types import Commit, StatEntry
from .list_model import WindowedListModel
from .range_select import CommitRange

COMMITS_VIEW = "commits"
STATS_VIEW = "stats"
DIFF_VIEW = "diff"


@dataclass
class CommitsScreen:
    kind: ClassVar[str] = COMMITS_VIEW

    commits: list[Commit]
    model: WindowedListModel = field(default_factory=WindowedListModel)


@dataclass
class StatsScreen:
    kind: ClassVar[str] = STATS_VIEW

    commit_range: CommitRange
    stats: list[StatEntry]
    model: WindowedListModel = field(default_factory=WindowedListModel)

    def entry_at_cursor(self) -> StatEntry | None:
        if not self.stats or self.model.cursor < 0:
            return None
        return self.stats[self.model.cursor]


@dataclass
class DiffScreen:
    kind: ClassVar[str] = DIFF_VIEW

    commit_range: CommitRange
    path: str
    old_path: str
    lines: list[str]
    model: WindowedListModel = field(default_factory=WindowedListModel)

    def shows(self, path: str) -> bool:
        """Return whether a change notification for ``path`` affects this diff."""
        return bool(path) and path == self.path


Screen = Union[CommitsScreen, StatsScreen, DiffScreen]


class ViewStack:
    """Non-empty stack of screens with the commit list at the root."""

    def __init__(self, root: CommitsScreen) -> None:
        self._root = root
        self._screens: list[Screen] = [root]

    @property
    def root(self) -> CommitsScreen:
        return self._root

    @property
    def top(self) -> Screen:
        return self._screens[-1]

    def __len__(self) -> int:
        return len(self._screens)

    def __iter__(self):
        return iter(self._screens)

    def kinds(self) -> tuple[str, ...]:
        return tuple(screen.kind for screen in self._screens)

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def back(self) -> bool:
        """Pop the top screen; return ``False`` at the root (caller should exit)."""
        if len(self._screens) == 1:
            return False
        self._screens.pop()
        return True
