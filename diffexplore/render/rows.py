"""Row formatting for the commit, changed-file and diff screens.

Every function returns one styled line without trailing padding; the frame
builder clips and pads rows to the terminal width.
"""

from __future__ import annotations

from ..ansi import fit_ansi_line, pad_left, sanitize_terminal_text
from ..git.decoration import parse_decoration
from ..git.types import (
    DIFF_LINE_ADDED,
    DIFF_LINE_CONTEXT,
    DIFF_LINE_HUNK,
    DIFF_LINE_REMOVED,
    ChangeKind,
    Commit,
    StatEntry,
    classify_diff_line,
)
from ..ui_theme import UITheme
from .highlight import highlight_code

MARK_SYMBOL = "▶"
MARKER_WIDTH = 2
HASH_WIDTH = 9
AGE_WIDTH = 4
AUTHOR_WIDTH = 21
MAX_AUTHOR_CHARS = 20

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY
_AGE_UNITS = ((_YEAR, "Y"), (_MONTH, "M"), (_DAY, "D"), (_HOUR, "h"), (_MINUTE, "m"))


def format_age(timestamp: int, now: float) -> str:
    """Compact age of a commit in its largest whole unit, e.g. ``3D`` or ``5h``."""
    elapsed = max(0, int(now) - int(timestamp))
    for unit_seconds, suffix in _AGE_UNITS:
        if elapsed >= unit_seconds:
            return f"{elapsed // unit_seconds}{suffix}"
    return f"{elapsed}s"


def abbreviate_name(name: str, limit: int = MAX_AUTHOR_CHARS) -> str:
    """Shorten long author names to initials while keeping the last name."""
    if len(name) <= limit:
        return name
    parts = name.split()
    if len(parts) >= 3:
        initials = "".join(part[0] for part in parts[1:-1])
        return f"{parts[0]} {initials} {parts[-1]}"[:limit]
    if len(parts) == 2:
        return f"{parts[0][0]} {parts[1]}"[:limit]
    return name[:limit]


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def decoration_labels(raw: str, theme: UITheme) -> str:
    """Render ``[branch] <tag> {ref}`` labels for a commit's decorations."""
    if not raw:
        return ""
    info = parse_decoration(raw)
    parts: list[str] = []
    if info.branches:
        parts.append(_styled(theme.branch, "".join(f"[{name}] " for name in info.branches), theme))
    if info.tags:
        parts.append(_styled(theme.tag, "".join(f"<{name}> " for name in info.tags), theme))
    if info.refs:
        parts.append(_styled(theme.ref, "".join(f"{{{name}}} " for name in info.refs), theme))
    return "".join(parts)


def commit_row(commit: Commit, *, marked: bool, now: float, theme: UITheme) -> str:
    marker = fit_ansi_line(MARK_SYMBOL if marked else "", MARKER_WIDTH)
    revision = fit_ansi_line(commit.short_revision, HASH_WIDTH)
    age = pad_left(format_age(commit.timestamp, now), AGE_WIDTH - 1) + " "
    author = fit_ansi_line(sanitize_terminal_text(abbreviate_name(commit.author_name)), AUTHOR_WIDTH)
    return "".join(
        (
            _styled(theme.marker, marker, theme),
            _styled(theme.commit_hash, revision, theme),
            _styled(theme.commit_age, age, theme),
            _styled(theme.commit_author, author, theme),
            decoration_labels(commit.decoration, theme),
            sanitize_terminal_text(commit.subject),
        )
    )


def _stat_style(change: ChangeKind, theme: UITheme) -> str:
    if change is ChangeKind.ADDED:
        return theme.stat_added
    if change is ChangeKind.DELETED:
        return theme.stat_deleted
    if change is ChangeKind.RENAMED:
        return theme.stat_renamed
    return theme.stat_modified


def stat_row(entry: StatEntry, theme: UITheme) -> str:
    path = entry.path
    if entry.old_path:
        path = f"{path} ← {entry.old_path}"
    letter = _styled(_stat_style(entry.change, theme), entry.change.letter, theme)
    return f"{letter} {sanitize_terminal_text(path)}"


def diff_row(line: str, path: str, theme: UITheme, syntax_style: str) -> str:
    """Style one diff line by its leading character.

    Added, removed and context lines keep the marker in the theme color and
    syntax-highlight the code after it; hunk headers and file headers are
    colored as a whole.
    """
    text = sanitize_terminal_text(line)
    kind = classify_diff_line(line)
    if kind == DIFF_LINE_HUNK:
        return _styled(theme.diff_hunk, text, theme)
    if _is_file_header(line):
        return _styled(theme.diff_context, text, theme)
    style = {
        DIFF_LINE_ADDED: theme.diff_added,
        DIFF_LINE_REMOVED: theme.diff_removed,
        DIFF_LINE_CONTEXT: theme.diff_context,
    }[kind]
    if not theme.syntax_highlight or (kind == DIFF_LINE_CONTEXT and not line.startswith(" ")):
        return _styled(style, text, theme)
    marker, body = text[:1], text[1:]
    return _styled(style, marker, theme) + highlight_code(body, path, syntax_style)


def _is_file_header(line: str) -> bool:
    return line.startswith(("+++ ", "--- ", "diff --git ", "index ", "new file", "deleted file", "rename ", "similarity "))


__all__ = [
    "abbreviate_name",
    "commit_row",
    "decoration_labels",
    "diff_row",
    "format_age",
    "stat_row",
]
