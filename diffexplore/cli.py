"""Command-line front door for diffexplore.

Parses the optional repository path and dispatches into the interactive
runtime. There are no other flags; settings live in the config file.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .logs import configure_logging
from .runtime import run_app


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser on a repository.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse git commits, changed files and diffs in the terminal."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Repository root. Defaults to current directory.",
    )
    args = parser.parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Path not found: {path}")

    configure_logging()
    run_app(path)


if __name__ == "__main__":
    main()
