"""Input-layer public API: raw key decoding and the fixed key bindings."""

from .keys import KEY_BINDINGS, KeyBinding, KeyMap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_BINDINGS",
    "KeyBinding",
    "KeyMap",
    "_PENDING_BYTES",
    "read_key",
]
