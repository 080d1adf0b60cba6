"""Frame rendering for the navigation screens.

Builds full-screen ANSI frames from ``NavigationState`` without mutating it:
the visible window of the top screen plus a one-row status bar.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width, fit_ansi_line, sanitize_terminal_text
from ..navigation.controller import NavigationState
from ..navigation.range_select import select_commit_range
from ..navigation.view_stack import CommitsScreen, DiffScreen, StatsScreen
from ..ui_theme import UITheme
from .rows import commit_row, diff_row, stat_row

WATCHER_READY_SYMBOL = "#"
WATCHER_PENDING_SYMBOL = "-"
STATUS_RIGHT_WIDTH = 5


@dataclass(frozen=True)
class RenderContext:
    state: NavigationState
    theme: UITheme
    syntax_style: str
    now: float


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def status_text(state: NavigationState) -> str:
    """Left status: ``start..end`` for list screens, plus ``: path`` on the diff screen."""
    top = state.top
    if isinstance(top, CommitsScreen):
        if not top.commits:
            return "no commits"
        return select_commit_range(top.commits, top.model).label()
    if isinstance(top, StatsScreen):
        return top.commit_range.label()
    return f"{top.commit_range.label()}: {top.path}"


def status_row(state: NavigationState, theme: UITheme) -> str:
    width = state.columns
    right_width = min(STATUS_RIGHT_WIDTH, width)
    left_width = max(0, width - right_width)
    left = sanitize_terminal_text(status_text(state))
    style = theme.status_bar
    if state.status_message:
        left = f"{left}  {sanitize_terminal_text(state.status_message)}"
        style = theme.status_message
    indicator = WATCHER_READY_SYMBOL if state.watcher_ready else WATCHER_PENDING_SYMBOL
    right = " " * max(0, right_width - display_width(indicator) - 1) + indicator + " "
    text = fit_ansi_line(left, left_width) + fit_ansi_line(right, right_width)
    return f"{style}{text}\033[0m"


def list_rows(context: RenderContext) -> list[str]:
    """Styled rows for the visible window of the top screen, cursor row highlighted."""
    state = context.state
    theme = context.theme
    top = state.top
    model = top.model
    width = state.columns
    rows: list[str] = []
    for index in model.visible_indices():
        if isinstance(top, CommitsScreen):
            row = commit_row(
                top.commits[index],
                marked=index == model.marked,
                now=context.now,
                theme=theme,
            )
        elif isinstance(top, StatsScreen):
            row = stat_row(top.stats[index], theme)
        elif isinstance(top, DiffScreen):
            row = diff_row(top.lines[index], top.path, theme, context.syntax_style)
        else:
            row = ""
        row = fit_ansi_line(row, width)
        if index == model.cursor:
            row = selected_with_ansi(row, theme)
        rows.append(row)
    return rows


def build_frame_lines(context: RenderContext) -> list[str]:
    state = context.state
    body_rows = state.list_height
    rows = list_rows(context)[:body_rows]
    blank = " " * state.columns
    rows.extend(blank for _ in range(body_rows - len(rows)))
    rows.append(status_row(state, context.theme))
    return rows[: max(1, state.lines)]


def render_frame(context: RenderContext) -> str:
    """Full-screen frame: cursor home, every row reset-terminated, CRLF separated."""
    lines = build_frame_lines(context)
    return "\033[H" + "\r\n".join(f"{line}\033[0m" for line in lines)


__all__ = [
    "RenderContext",
    "build_frame_lines",
    "list_rows",
    "render_frame",
    "selected_with_ansi",
    "status_row",
    "status_text",
]
