"""Raw terminal session: alternate screen, hidden cursor and frame writes."""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_ALT_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_ALT_SCREEN = b"\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Owns the tty for one session; constructing it fails with ``termios.error`` off a tty."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._restore_attrs = termios.tcgetattr(stdin_fd)

    def _write(self, data: bytes) -> None:
        while data:
            data = data[os.write(self.stdout_fd, data):]

    def write_frame(self, frame: str) -> None:
        self._write(frame.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Switch to raw input on the alternate screen; always restore on exit."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        try:
            self._write(ENTER_ALT_SCREEN)
            yield self
        finally:
            self._write(LEAVE_ALT_SCREEN)
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._restore_attrs)
