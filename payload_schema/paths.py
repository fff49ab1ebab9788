"""
paths.py - dotted field paths <-> segment tuples
=================================================

A field key in a schema is a dotted path such as ``"settings.locale"`` or
``"roles.[].name"``.  Internally every key is a tuple of *segments*; a segment
is a field name, a concrete array index (``int``, only ever produced while
walking a value) or the :data:`WILDCARD` marker.

Inside a dotted key ``[]`` (or ``$``) means "every element of the enclosing
array".  A schema key that is nothing but ``$`` or ``[]`` is the current
container itself; it adds no segment at all, so the container is addressed by
the empty path ``()``.

Public API
----------
WILDCARD
path_to_segments(key: str) -> tuple
segments_to_path(segments, remove_wildcards=False) -> str
get_in(value, segments) -> Any
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple, Union

__all__ = [
    "WILDCARD",
    "Segment",
    "path_to_segments",
    "segments_to_path",
    "has_wildcard",
    "get_in",
]


class _Wildcard:
    """Singleton marker for ``[]`` / ``$`` segments."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "WILDCARD"

    def __reduce__(self):
        return (_Wildcard, ())


WILDCARD = _Wildcard()

Segment = Union[str, int, _Wildcard]

_WILDCARD_TOKENS = ("[]", "$")


def path_to_segments(key: str) -> Tuple[Segment, ...]:
    """
    "username"          -> ("username",)
    "settings.notifyMe" -> ("settings", "notifyMe")
    "roles.[].name"     -> ("roles", WILDCARD, "name")
    "$"                 -> (WILDCARD,)
    """
    return tuple(WILDCARD if part in _WILDCARD_TOKENS else part for part in key.split("."))


def segments_to_path(segments: Sequence[Segment], remove_wildcards: bool = False) -> str:
    """Render *segments* back to a dotted key.

    A lone wildcard renders as ``$``, any other as ``[]``.  With
    *remove_wildcards* the ``[]`` parts are dropped; this is used for error
    paths, which already carry the concrete index in front of the marker
    (``roles.1.[]`` -> ``roles.1``).
    """
    parts = []
    for seg in segments:
        if seg is WILDCARD:
            if len(segments) == 1:
                parts.append("$")
            elif not remove_wildcards:
                parts.append("[]")
        else:
            parts.append(str(seg))
    return ".".join(parts)


def has_wildcard(segments: Sequence[Segment]) -> bool:
    return any(seg is WILDCARD for seg in segments)


def get_in(value: Any, segments: Sequence[Segment]) -> Any:
    """Resolve *segments* inside nested mappings / arrays; missing -> None."""
    current = value
    for seg in segments:
        if isinstance(current, Mapping):
            if seg not in current and isinstance(seg, int):
                seg = str(seg)
            current = current.get(seg)
        elif isinstance(current, (list, tuple)):
            try:
                index = seg if isinstance(seg, int) else int(seg)
            except (TypeError, ValueError):
                return None
            if not 0 <= index < len(current):
                return None
            current = current[index]
        else:
            return None
        if current is None:
            return None
    return current
