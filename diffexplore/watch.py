"""Poll-based change notifier for working-tree files.

A daemon thread compares per-file stat signatures between polls and emits
``WatchEvent`` records: one ``ready`` after the first scan, then ``changed``
for every repo-relative path that was edited, created or removed.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Callable, Collection
from pathlib import Path

from .events import WATCH_CHANGED, WATCH_READY, WatchEvent

logger = logging.getLogger(__name__)

DEFAULT_POLL_SECONDS = 0.5
SKIPPED_DIR_NAMES = frozenset({".git"})
IGNORED_REFRESH_SECONDS = 2.0

StatSignature = tuple[int, int, int]


def _path_stat_signature(entry: os.DirEntry) -> StatSignature | None:
    """Return ``(mtime_ns, size, mode)`` for a directory entry, or ``None`` if it vanished."""
    try:
        st = entry.stat(follow_symlinks=False)
    except OSError:
        return None
    return (st.st_mtime_ns, st.st_size, st.st_mode)


def scan_tree(root: Path, ignored: Collection[str] = frozenset()) -> dict[str, StatSignature]:
    """Map every file under ``root`` (outside ``.git``) to its stat signature.

    Keys are POSIX paths relative to ``root``, matching git's path output.
    An unreadable ``root`` raises ``OSError``; unreadable subdirectories are skipped.
    Files and directories whose relative path is in ``ignored`` are skipped
    along with everything beneath them.
    """
    signatures: dict[str, StatSignature] = {}
    pending: list[tuple[Path, str]] = [(root, "")]
    first = True
    while pending:
        directory, prefix = pending.pop()
        try:
            entries = list(os.scandir(directory))
        except OSError:
            if first:
                raise
            continue
        first = False
        for entry in entries:
            rel = f"{prefix}{entry.name}"
            if rel in ignored:
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                continue
            if is_dir:
                if entry.name not in SKIPPED_DIR_NAMES:
                    pending.append((Path(entry.path), f"{rel}/"))
                continue
            signature = _path_stat_signature(entry)
            if signature is not None:
                signatures[rel] = signature
    return signatures


def changed_paths(before: dict[str, StatSignature], after: dict[str, StatSignature]) -> list[str]:
    """Return sorted paths whose signature differs, including added and removed ones."""
    changed = {path for path, signature in after.items() if before.get(path) != signature}
    changed.update(path for path in before if path not in after)
    return sorted(changed)


class ChangeNotifier:
    """Background watcher for one repository; use as a context manager.

    ``emit`` is called from the watcher thread and must be thread-safe
    (``EventChannel.put``). If the first scan fails the notifier logs and stays
    silent, so the session simply runs without live refresh.
    """

    def __init__(
        self,
        root: Path,
        emit: Callable[[WatchEvent], None],
        poll_seconds: float = DEFAULT_POLL_SECONDS,
        ignored_paths: Callable[[], Collection[str] | None] | None = None,
    ) -> None:
        self.root = root
        self._emit = emit
        self.poll_seconds = max(0.05, poll_seconds)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._signatures: dict[str, StatSignature] | None = None
        self._ignored_paths = ignored_paths
        self._ignored: Collection[str] = frozenset()
        self._ignored_loaded_at: float | None = None

    def _current_ignored(self) -> Collection[str]:
        """Ignored paths, reloaded at most every ``IGNORED_REFRESH_SECONDS``."""
        if self._ignored_paths is None:
            return self._ignored
        now = time.monotonic()
        if self._ignored_loaded_at is None or now - self._ignored_loaded_at >= IGNORED_REFRESH_SECONDS:
            self._ignored = self._ignored_paths() or frozenset()
            self._ignored_loaded_at = now
        return self._ignored

    def prime(self) -> bool:
        """Take the baseline scan and emit ``ready``; return ``False`` on failure."""
        try:
            self._signatures = scan_tree(self.root, self._current_ignored())
        except OSError as exc:
            logger.warning("file watcher unavailable for %s: %s", self.root, exc)
            self._signatures = None
            return False
        self._emit(WatchEvent(WATCH_READY))
        return True

    def poll_once(self) -> list[str]:
        """Rescan once, emit ``changed`` for each differing path, and return them."""
        if self._signatures is None:
            return []
        try:
            current = scan_tree(self.root, self._current_ignored())
        except OSError as exc:
            logger.debug("watch scan failed: %s", exc)
            return []
        paths = changed_paths(self._signatures, current)
        self._signatures = current
        for path in paths:
            self._emit(WatchEvent(WATCH_CHANGED, path))
        return paths

    def _worker(self) -> None:
        if not self.prime():
            return
        while not self._stop.wait(self.poll_seconds):
            self.poll_once()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._worker,
            name="diffexplore-watch",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout_seconds: float = 1.0) -> None:
        self._stop.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=timeout_seconds)

    def __enter__(self) -> ChangeNotifier:
        self.start()
        return self

    def __exit__(self, *_exc_info) -> None:
        self.stop()


__all__ = ["ChangeNotifier", "DEFAULT_POLL_SECONDS", "changed_paths", "scan_tree"]
