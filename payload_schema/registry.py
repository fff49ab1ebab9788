"""
registry.py - name -> predicate lookup
======================================

A predicate is any callable ``(value, *args) -> bool``.  Schemas refer to
predicates by name (``{"validate": {"len": [5, 50]}}``); the composer resolves
those names through a :class:`PredicateRegistry` first and through the core
extras (:data:`EXTRA_PREDICATES`) second.

Whether a predicate wants its input as text is recorded when it is registered
(``string=True``).  String predicates are handed the stringified value, all
others receive the raw value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional

from .strings import STRING_PREDICATES

__all__ = [
    "Predicate",
    "RegisteredPredicate",
    "PredicateRegistry",
    "allowed_keys",
    "size",
    "is_string",
    "EXTRA_PREDICATES",
    "default_registry",
]

Predicate = Callable[..., Any]


@dataclass(frozen=True)
class RegisteredPredicate:
    name: str
    fn: Predicate
    string: bool = False


class PredicateRegistry:
    """Mutable mapping of predicate names to :class:`RegisteredPredicate`."""

    def __init__(self, predicates: Optional[Iterable[RegisteredPredicate]] = None):
        self._entries: dict[str, RegisteredPredicate] = {}
        for entry in predicates or ():
            self._entries[entry.name] = entry

    def register(self, name: str, fn: Predicate, *, string: bool = False) -> Predicate:
        if not callable(fn):
            raise TypeError(f"predicate {name!r} is not callable")
        self._entries[name] = RegisteredPredicate(name, fn, string)
        return fn

    def lookup(self, name: str) -> Optional[RegisteredPredicate]:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def copy(self) -> "PredicateRegistry":
        return PredicateRegistry(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# --------------------------------------------------------------------------- #
# Core extras                                                                 #
# --------------------------------------------------------------------------- #

def allowed_keys(value: Any, *keys: str) -> bool:
    """True iff every key of the mapping *value* is one of *keys*."""
    if not isinstance(value, Mapping):
        return False
    return not (set(value) - set(keys))


def size(value: Any, min_len: int, max_len: Optional[int] = None) -> bool:
    """True iff *value* is an array whose length lies in ``[min_len, max_len]``."""
    if not isinstance(value, (list, tuple)):
        return False
    return len(value) >= min_len and (max_len is None or len(value) <= max_len)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


EXTRA_PREDICATES = PredicateRegistry([
    RegisteredPredicate("allowedKeys", allowed_keys),
    RegisteredPredicate("size", size),
    RegisteredPredicate("isString", is_string),
])


def default_registry() -> PredicateRegistry:
    """A fresh registry holding the bundled string-format predicates."""
    registry = PredicateRegistry()
    for name, fn in STRING_PREDICATES.items():
        registry.register(name, fn, string=True)
    return registry
