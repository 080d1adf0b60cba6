"""Read-only JSON config helpers.

Holds UI theme, color, syntax style, watch interval and diff options.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..git.types import DiffOptions
from ..watch import DEFAULT_POLL_SECONDS

logger = logging.getLogger(__name__)

APP_NAME = "diffexplore"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_SYNTAX_STYLE = "monokai"


@dataclass(frozen=True)
class AppConfig:
    theme: str | None = None
    no_color: bool = False
    syntax_style: str = DEFAULT_SYNTAX_STYLE
    watch_poll_seconds: float = DEFAULT_POLL_SECONDS
    diff_options: DiffOptions = field(default_factory=DiffOptions)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else is ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _load_positive_float(data: dict[str, object], key: str, default: float) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def _load_nonnegative_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def colors_disabled(data: dict[str, object]) -> bool:
    """Honor both the ``no_color`` config key and the ``NO_COLOR`` convention."""
    if os.environ.get("NO_COLOR"):
        return True
    return _load_bool(data, "no_color")


def load_app_config() -> AppConfig:
    data = load_config()
    return AppConfig(
        theme=_load_str(data, "theme"),
        no_color=colors_disabled(data),
        syntax_style=_load_str(data, "syntax_style") or DEFAULT_SYNTAX_STYLE,
        watch_poll_seconds=_load_positive_float(data, "watch_poll_seconds", DEFAULT_POLL_SECONDS),
        diff_options=DiffOptions(
            context_lines=_load_nonnegative_int(data, "diff_context_lines", DiffOptions.context_lines),
            ignore_whitespace=_load_bool(data, "diff_ignore_whitespace"),
        ),
    )
