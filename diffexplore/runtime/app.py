"""Application bootstrap: repository discovery, startup queries and wiring.

Any failure before the event loop starts is reported through ``SystemExit``
so the process exits non-zero with a readable message.
"""

from __future__ import annotations

import logging
import sys
import termios
import time
from pathlib import Path

from ..events import EventChannel
from ..git.ignore import list_ignored_paths
from ..git.query import GitQueryGateway, resolve_repo_root
from ..git.types import GitQueryError
from ..navigation.controller import NavigationController
from ..render import RenderContext, render_frame
from ..ui_theme import resolve_theme
from ..watch import ChangeNotifier
from .config import load_app_config
from .input_source import TerminalInputSource
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_app(path: Path) -> None:
    """Browse the repository containing ``path`` until the user quits."""
    repo_root = resolve_repo_root(path)
    if repo_root is None:
        raise SystemExit(f"Error: not a git repository: {path}")

    config = load_app_config()
    gateway = GitQueryGateway(repo_root, config.diff_options)
    try:
        commits = gateway.list_commits()
    except GitQueryError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    logger.info("loaded %d commits from %s", len(commits), repo_root)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
    except termios.error as exc:
        raise SystemExit(f"Error: cannot start terminal UI: {exc}") from exc

    controller = NavigationController(gateway, commits)
    theme = resolve_theme(config.theme, no_color=config.no_color)
    channel = EventChannel()

    def render() -> str:
        return render_frame(
            RenderContext(
                state=controller.state,
                theme=theme,
                syntax_style=config.syntax_style,
                now=time.time(),
            )
        )

    notifier = ChangeNotifier(
        repo_root,
        channel.put,
        config.watch_poll_seconds,
        ignored_paths=lambda: list_ignored_paths(repo_root),
    )
    with notifier, TerminalInputSource(stdin_fd, channel.put):
        run_main_loop(controller, terminal, channel, RuntimeLoopCallbacks(render=render))
