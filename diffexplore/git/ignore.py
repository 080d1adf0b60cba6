"""Gitignore lookup for the change notifier.

Asks git for untracked ignored files and directories so polling can skip
trees such as ``node_modules/`` or virtualenvs. Tracked files are never
reported, so every file a diff can show stays watched.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

IGNORE_QUERY_TIMEOUT_SECONDS = 2.0


def parse_ignored_output(output: bytes) -> frozenset[str]:
    """Parse ``git ls-files -z --others -i --directory`` output into repo-relative paths."""
    paths: set[str] = set()
    for raw in output.split(b"\x00"):
        rel = raw.decode("utf-8", errors="replace").rstrip("/")
        if rel:
            paths.add(rel)
    return frozenset(paths)


def list_ignored_paths(
    repo_root: Path,
    timeout_seconds: float = IGNORE_QUERY_TIMEOUT_SECONDS,
) -> frozenset[str] | None:
    """Return ignored untracked paths under ``repo_root``, or ``None`` when git fails."""
    try:
        proc = subprocess.run(
            [
                "git",
                "-C",
                str(repo_root),
                "ls-files",
                "-z",
                "--others",
                "-i",
                "--exclude-standard",
                "--directory",
            ],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("ignored-path query failed: %s", exc)
        return None
    if proc.returncode != 0:
        logger.debug("ignored-path query exited with status %d", proc.returncode)
        return None
    return parse_ignored_output(proc.stdout)


__all__ = ["list_ignored_paths", "parse_ignored_output"]
