"""Navigation controller: the single consumer of input, resize and watch events.

Owns the view stack and routes every action to the top screen's list model.
Queries run synchronously inside event handling; a failed query opens the
screen empty and leaves a status message instead of ending the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..events import WATCH_CHANGED, WATCH_READY, Event, KeyEvent, ResizeEvent, WatchEvent
from ..git.query import GitQueryGateway
from ..git.types import Commit, GitQueryError, StatEntry
from ..input.keys import KeyMap
from .list_model import WindowedListModel
from .range_select import CommitRange, select_commit_range
from .view_stack import CommitsScreen, DiffScreen, Screen, StatsScreen, ViewStack

logger = logging.getLogger(__name__)

STATUS_ROWS = 1


@dataclass
class NavigationState:
    """Everything the renderer reads; mutated only by ``NavigationController``."""

    stack: ViewStack
    columns: int = 80
    lines: int = 24
    watcher_ready: bool = False
    status_message: str = ""
    dirty: bool = True

    @property
    def list_height(self) -> int:
        return max(1, self.lines - STATUS_ROWS)

    @property
    def top(self) -> Screen:
        return self.stack.top


class NavigationController:
    """Apply events to navigation state; ``handle_event`` returns ``True`` to quit."""

    def __init__(self, gateway: GitQueryGateway, commits: list[Commit]) -> None:
        self.gateway = gateway
        self.state = NavigationState(stack=ViewStack(CommitsScreen(commits=list(commits))))
        self.state.stack.root.model = WindowedListModel.create(len(commits), height=self.state.list_height)
        self._keys = KeyMap.bind(self)

    @property
    def top(self) -> Screen:
        return self.state.stack.top

    def handle_event(self, event: Event) -> bool:
        if isinstance(event, KeyEvent):
            return self.handle_key(event.key)
        if isinstance(event, ResizeEvent):
            self.resize(event.columns, event.lines)
            return False
        if isinstance(event, WatchEvent):
            self.handle_watch_event(event)
            return False
        logger.debug("ignoring unknown event %r", event)
        return False

    def handle_key(self, key: str) -> bool:
        if key not in self._keys:
            return False
        self.state.status_message = ""
        self.state.dirty = True
        return bool(self._keys.dispatch(key))

    def resize(self, columns: int, lines: int) -> None:
        self.state.columns = max(1, columns)
        self.state.lines = max(1, lines)
        height = self.state.list_height
        for screen in self.state.stack:
            screen.model.set_height(height)
        self.state.dirty = True

    def quit(self) -> bool:
        return True

    def back(self) -> bool:
        """Pop one screen; at the root this terminates the session."""
        if not self.state.stack.back():
            return True
        logger.debug("back to %s", self.top.kind)
        return False

    def toggle_mark(self) -> bool:
        if isinstance(self.top, CommitsScreen):
            self.top.model.toggle_mark()
        return False

    def next_item(self) -> bool:
        self.top.model.next_item()
        return False

    def prev_item(self) -> bool:
        self.top.model.prev_item()
        return False

    def next_page(self) -> bool:
        self.top.model.next_page()
        return False

    def prev_page(self) -> bool:
        self.top.model.prev_page()
        return False

    def enter(self) -> bool:
        top = self.top
        if isinstance(top, CommitsScreen):
            self._open_stats()
        elif isinstance(top, StatsScreen):
            self._open_diff(top)
        return False

    def current_range(self) -> CommitRange | None:
        """Range under the commit cursor and mark, ``None`` when there are no commits."""
        root = self.state.stack.root
        if not root.commits:
            return None
        return select_commit_range(root.commits, root.model)

    def _open_stats(self) -> None:
        commit_range = self.current_range()
        if commit_range is None:
            return
        stats = self._query_stats(commit_range)
        screen = StatsScreen(
            commit_range=commit_range,
            stats=stats,
            model=WindowedListModel.create(len(stats), height=self.state.list_height),
        )
        self.state.stack.push(screen)
        logger.debug("opened stats for %s (%d entries)", commit_range.label(), len(stats))

    def _open_diff(self, stats_screen: StatsScreen) -> None:
        entry = stats_screen.entry_at_cursor()
        if entry is None:
            return
        commit_range = stats_screen.commit_range
        lines = self._query_diff(commit_range, entry.path, entry.old_path)
        screen = DiffScreen(
            commit_range=commit_range,
            path=entry.path,
            old_path=entry.old_path,
            lines=lines,
            model=WindowedListModel.create(len(lines), cursor_enabled=False, height=self.state.list_height),
        )
        self.state.stack.push(screen)
        logger.debug("opened diff for %s (%d lines)", entry.path, len(lines))

    def handle_watch_event(self, event: WatchEvent) -> None:
        if event.kind == WATCH_READY:
            if not self.state.watcher_ready:
                self.state.watcher_ready = True
                self.state.dirty = True
            return
        if event.kind == WATCH_CHANGED:
            self.refresh_diff(event.path)

    def refresh_diff(self, path: str) -> bool:
        """Re-query the visible diff when ``path`` is the file it shows.

        Notifications for other paths, or while another screen is on top, are
        dropped; the diff is always re-derivable from its stored range and path.
        """
        top = self.top
        if not isinstance(top, DiffScreen) or not top.shows(path):
            return False
        top.lines = self._query_diff(top.commit_range, top.path, top.old_path)
        top.model.set_count(len(top.lines))
        self.state.dirty = True
        logger.debug("refreshed diff for %s (%d lines)", path, len(top.lines))
        return True

    def _query_stats(self, commit_range: CommitRange) -> list[StatEntry]:
        try:
            return self.gateway.diff_stat(commit_range.start, commit_range.end)
        except GitQueryError as exc:
            logger.warning("stat query for %s failed: %s", commit_range.label(), exc)
            self.state.status_message = str(exc)
            return []

    def _query_diff(self, commit_range: CommitRange, path: str, old_path: str) -> list[str]:
        try:
            return self.gateway.diff(commit_range.start, commit_range.end, path, old_path)
        except GitQueryError as exc:
            logger.warning("diff query for %s failed: %s", path, exc)
            self.state.status_message = str(exc)
            return []
