"""
utils.py – shared, low-level utilities for the payload-schema package.

This module consolidates common helpers for:
- Type tags (the ``type`` attribute of a field rule)
- Type checking (datetime strings, containers)
- String coercion for string-oriented predicates
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import Any, Mapping, Tuple, Union

# --------------------------------------------------------------------------- #
# Type Checking & Validation Helpers                                          #
# --------------------------------------------------------------------------- #

_DT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+\-]\d{2}:\d{2})$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _is_datetime(value: Any) -> bool:
    """Return True iff *value* is a valid ISO-8601 date-time string."""
    if not isinstance(value, str) or not _DT_RE.fullmatch(value):
        return False
    try:
        _dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def _is_date(value: Any) -> bool:
    """Return True iff *value* is an ISO-8601 calendar date or date-time."""
    if not isinstance(value, str):
        return False
    if _DATE_RE.fullmatch(value):
        try:
            _dt.date.fromisoformat(value)
            return True
        except ValueError:
            return False
    return _is_datetime(value)


_TYPE_MAP: dict[str, Union[type, Tuple[type, ...]]] = {
    "string": str,
    "integer": int,
    "float": (int, float),
    "boolean": bool,
    "object": Mapping,
    "array": (list, tuple),
}


def _is_container(value: Any) -> bool:
    """True for the values `validate` accepts at the root: mappings and arrays."""
    return isinstance(value, (Mapping, list, tuple))


def _check_type(value: Any, tag: str) -> bool:
    """Return True iff *value* matches the declared type *tag*.

    Booleans are not numbers here, even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool) and tag in ("integer", "float"):
        return False
    return isinstance(value, _TYPE_MAP[tag])


# --------------------------------------------------------------------------- #
# String coercion                                                             #
# --------------------------------------------------------------------------- #

def _stringify(value: Any) -> str:
    """Textual form handed to string-oriented predicates ("" when falsy)."""
    if value is True:   return "true"
    if not value:       return ""
    return str(value)
