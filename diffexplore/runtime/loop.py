"""Main interactive event loop for the terminal UI.

Drains the serialized event channel one event at a time, lets the controller
apply it to completion, and redraws whenever the controller marks state dirty.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..events import EventChannel
from ..navigation.controller import NavigationController
from .terminal import TerminalController

logger = logging.getLogger(__name__)

EVENT_WAIT_SECONDS = 0.25


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    render: Callable[[], str]


def run_main_loop(
    controller: NavigationController,
    terminal: TerminalController,
    channel: EventChannel,
    callbacks: RuntimeLoopCallbacks,
    *,
    wait_seconds: float = EVENT_WAIT_SECONDS,
) -> None:
    """Run until an event handler asks to quit."""
    state = controller.state
    with terminal.raw_mode():
        while True:
            if state.dirty:
                terminal.write_frame(callbacks.render())
                state.dirty = False

            event = channel.get(timeout_seconds=wait_seconds)
            if event is None:
                continue
            if controller.handle_event(event):
                logger.debug("quit requested by %r", event)
                break
