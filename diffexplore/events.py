"""Event records and the serialized channel feeding the navigation controller.

Terminal input and the change notifier run on their own threads and only ever
``put`` into the channel; the main loop is the single consumer.
"""

from __future__ import annotations

from dataclasses import dataclass
from queue import Empty, Queue
from typing import Union

WATCH_READY = "ready"
WATCH_CHANGED = "changed"


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    lines: int


@dataclass(frozen=True)
class WatchEvent:
    """Change-notifier signal; ``path`` is repo-relative and only set for changes."""

    kind: str
    path: str = ""


Event = Union[KeyEvent, ResizeEvent, WatchEvent]


class EventChannel:
    """Multi-producer, single-consumer FIFO of events."""

    def __init__(self) -> None:
        self._queue: Queue[Event] = Queue()

    def put(self, event: Event) -> None:
        self._queue.put(event)

    def get(self, timeout_seconds: float | None = None) -> Event | None:
        """Return the next event, or ``None`` when ``timeout_seconds`` elapses."""
        try:
            return self._queue.get(timeout=timeout_seconds)
        except Empty:
            return None


__all__ = [
    "Event",
    "EventChannel",
    "KeyEvent",
    "ResizeEvent",
    "WATCH_CHANGED",
    "WATCH_READY",
    "WatchEvent",
]
