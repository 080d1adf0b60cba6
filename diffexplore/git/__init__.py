"""Git query layer: record types, decoration parsing and the query gateway."""

from .decoration import parse_decoration
from .ignore import list_ignored_paths, parse_ignored_output
from .query import GitQueryGateway, parse_log_output, parse_name_status, resolve_repo_root
from .types import (
    ChangeKind,
    Commit,
    Decoration,
    DiffOptions,
    GitQueryError,
    StatEntry,
    classify_diff_line,
)

__all__ = [
    "ChangeKind",
    "Commit",
    "Decoration",
    "DiffOptions",
    "GitQueryError",
    "GitQueryGateway",
    "StatEntry",
    "classify_diff_line",
    "list_ignored_paths",
    "parse_decoration",
    "parse_ignored_output",
    "parse_log_output",
    "parse_name_status",
    "resolve_repo_root",
]
