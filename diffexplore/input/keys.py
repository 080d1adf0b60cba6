"""Fixed key bindings mapping key tokens to navigation actions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

Action = Callable[[], bool]


@dataclass(frozen=True)
class KeyBinding:
    """Key tokens that all trigger the controller method named ``action``."""

    keys: tuple[str, ...]
    action: str


KEY_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(("CTRL_C",), "quit"),
    KeyBinding(("ESC", "q"), "back"),
    KeyBinding((" ",), "toggle_mark"),
    KeyBinding(("j", "DOWN"), "next_item"),
    KeyBinding(("k", "UP"), "prev_item"),
    KeyBinding(("CTRL_F", "PAGE_DOWN"), "next_page"),
    KeyBinding(("CTRL_U", "CTRL_B", "PAGE_UP"), "prev_page"),
    KeyBinding(("ENTER",), "enter"),
)


class KeyMap:
    """Dispatch table from key token to a bound action; actions return ``True`` to quit."""

    def __init__(self, handlers: dict[str, Action]) -> None:
        self._handlers = dict(handlers)

    @classmethod
    def bind(cls, target: object, bindings: Iterable[KeyBinding] = KEY_BINDINGS) -> KeyMap:
        """Resolve every binding's action name against ``target``."""
        handlers: dict[str, Action] = {}
        for binding in bindings:
            action = getattr(target, binding.action)
            for key in binding.keys:
                handlers[key] = action
        return cls(handlers)

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when the key is unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return bool(handler())
