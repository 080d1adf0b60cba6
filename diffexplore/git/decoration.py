"""Split ``git log --format=%D`` decorations into branches, tags and refs.

The gateway asks git for ``--decorate=full`` so ref namespaces are explicit.
Short names (``--decorate=short``) are also accepted and classified by shape.
"""

from __future__ import annotations

from .types import Decoration

_HEAD_POINTER = "HEAD -> "
_TAG_PREFIX = "tag: "
_HEADS_NS = "refs/heads/"
_TAGS_NS = "refs/tags/"
_REMOTES_NS = "refs/remotes/"
_REFS_NS = "refs/"


def _strip_prefix(name: str, prefix: str) -> str:
    return name[len(prefix):] if name.startswith(prefix) else name


def parse_decoration(raw: str) -> Decoration:
    """Parse a ``%D`` string such as ``HEAD -> refs/heads/main, tag: refs/tags/v1``.

    Local branches go to ``branches``, ``tag:`` entries to ``tags``, and
    everything else (``HEAD``, remote-tracking and other refs) to ``refs``.
    """
    branches: list[str] = []
    tags: list[str] = []
    refs: list[str] = []
    for item in raw.split(","):
        name = item.strip()
        if not name:
            continue
        if name.startswith(_HEAD_POINTER):
            refs.append("HEAD")
            name = name[len(_HEAD_POINTER):].strip()
        if name.startswith(_TAG_PREFIX):
            tags.append(_strip_prefix(name[len(_TAG_PREFIX):].strip(), _TAGS_NS))
        elif name.startswith(_HEADS_NS):
            branches.append(name[len(_HEADS_NS):])
        elif name.startswith(_REMOTES_NS):
            refs.append(name[len(_REMOTES_NS):])
        elif name.startswith(_REFS_NS):
            refs.append(name[len(_REFS_NS):])
        elif name == "HEAD" or "/" in name:
            refs.append(name)
        else:
            branches.append(name)
    return Decoration(branches=tuple(branches), tags=tuple(tags), refs=tuple(refs))
