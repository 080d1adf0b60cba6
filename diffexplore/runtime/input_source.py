"""Terminal input producer thread.

Decodes keys from stdin and watches the terminal size, posting ``KeyEvent``
and ``ResizeEvent`` records into the shared event channel.
"""

from __future__ import annotations

import logging
import shutil
import threading
from collections.abc import Callable

from ..events import Event, KeyEvent, ResizeEvent
from ..input import read_key

logger = logging.getLogger(__name__)

INPUT_POLL_MS = 120


def _terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


class TerminalInputSource:
    """Background reader feeding one ``emit`` callback; use as a context manager."""

    def __init__(
        self,
        stdin_fd: int,
        emit: Callable[[Event], None],
        terminal_size: Callable[[], tuple[int, int]] = _terminal_size,
        poll_ms: int = INPUT_POLL_MS,
    ) -> None:
        self.stdin_fd = stdin_fd
        self._emit = emit
        self._terminal_size = terminal_size
        self.poll_ms = poll_ms
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._last_size: tuple[int, int] | None = None
        self._skip_next_lf = False

    def check_resize(self) -> bool:
        """Emit a ``ResizeEvent`` when the terminal size changed since last check."""
        size = self._terminal_size()
        if size == self._last_size:
            return False
        self._last_size = size
        self._emit(ResizeEvent(columns=size[0], lines=size[1]))
        return True

    def translate(self, key: str) -> str | None:
        """Normalize CR/LF pairs to a single ``ENTER`` token; ``None`` drops the key."""
        if key == "ENTER_LF" and self._skip_next_lf:
            self._skip_next_lf = False
            return None
        self._skip_next_lf = key == "ENTER_CR"
        if key in {"ENTER_CR", "ENTER_LF"}:
            return "ENTER"
        return key

    def read_once(self) -> None:
        key = read_key(self.stdin_fd, timeout_ms=self.poll_ms)
        if key == "":
            self.check_resize()
            return
        translated = self.translate(key)
        if translated is not None:
            self._emit(KeyEvent(translated))

    def _worker(self) -> None:
        self.check_resize()
        while not self._stop.is_set():
            try:
                self.read_once()
            except OSError as exc:
                logger.warning("terminal input failed: %s", exc)
                self._emit(KeyEvent("CTRL_C"))
                return

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._worker,
            name="diffexplore-input",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout_seconds: float = 1.0) -> None:
        self._stop.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=timeout_seconds)

    def __enter__(self) -> TerminalInputSource:
        self.start()
        return self

    def __exit__(self, *_exc_info) -> None:
        self.stop()


__all__ = ["INPUT_POLL_MS", "TerminalInputSource"]
