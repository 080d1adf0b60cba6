"""Pygments syntax coloring for the code body of diff lines.

Lexers are chosen from the diffed file's name; unknown names fall back to
Pygments' plain text lexer. Results are cached per line since the same rows
are redrawn on every scroll step.
"""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

FALLBACK_STYLE = "monokai"


@lru_cache(maxsize=64)
def lexer_for_path(path: str) -> Lexer:
    try:
        return get_lexer_for_filename(path.rsplit("/", 1)[-1], stripnl=False, ensurenl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False, ensurenl=False)


@lru_cache(maxsize=16)
def formatter_for_style(style: str) -> Terminal256Formatter:
    """Return a terminal formatter, replacing unknown style names with ``monokai``."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = FALLBACK_STYLE
    return Terminal256Formatter(style=style)


@lru_cache(maxsize=4096)
def highlight_code(code: str, path: str, style: str) -> str:
    """Colorize one line of source text for the file at ``path``."""
    if not code.strip():
        return code
    rendered = highlight(code, lexer_for_path(path), formatter_for_style(style))
    return rendered.rstrip("\n")
