"""UI theme definitions and selection helpers.

Themes are ANSI palettes for list rows, diff lines and the status bar. Syntax
highlighting style for diff bodies remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    marker: str
    commit_hash: str
    commit_age: str
    commit_author: str
    branch: str
    tag: str
    ref: str
    stat_added: str
    stat_deleted: str
    stat_modified: str
    stat_renamed: str
    diff_added: str
    diff_removed: str
    diff_hunk: str
    diff_context: str
    status_bar: str
    status_message: str
    syntax_highlight: bool = True


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    marker="\033[1;38;5;214m",
    commit_hash="\033[38;5;176m",
    commit_age="\033[38;5;109m",
    commit_author="\033[38;5;252m",
    branch="\033[1;38;5;42m",
    tag="\033[1;38;5;229m",
    ref="\033[38;5;81m",
    stat_added="\033[1;38;5;42m",
    stat_deleted="\033[1;38;5;203m",
    stat_modified="\033[1;38;5;214m",
    stat_renamed="\033[1;38;5;81m",
    diff_added="\033[38;5;42m",
    diff_removed="\033[38;5;203m",
    diff_hunk="\033[38;5;81m",
    diff_context="\033[38;5;250m",
    status_bar="\033[48;5;60;38;5;255m",
    status_message="\033[48;5;60;1;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    marker="\033[1;38;5;45m",
    commit_hash="\033[38;5;117m",
    commit_age="\033[38;5;73m",
    commit_author="\033[38;5;153m",
    branch="\033[1;38;5;84m",
    tag="\033[1;38;5;153m",
    ref="\033[38;5;39m",
    stat_added="\033[1;38;5;84m",
    stat_deleted="\033[1;38;5;210m",
    stat_modified="\033[1;38;5;215m",
    stat_renamed="\033[1;38;5;45m",
    diff_added="\033[38;5;84m",
    diff_removed="\033[38;5;210m",
    diff_hunk="\033[38;5;45m",
    diff_context="\033[38;5;153m",
    status_bar="\033[48;5;24;38;5;255m",
    status_message="\033[48;5;24;1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="\033[7m",
    marker="",
    commit_hash="",
    commit_age="",
    commit_author="",
    branch="",
    tag="",
    ref="",
    stat_added="",
    stat_deleted="",
    stat_modified="",
    stat_renamed="",
    diff_added="",
    diff_removed="",
    diff_hunk="",
    diff_context="",
    status_bar="\033[7m",
    status_message="\033[7m",
    syntax_highlight=False,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
