"""
strings.py - bundled string-format predicates
=============================================

These predicates assume textual input.  They are registered with
``string=True`` by :func:`payload_schema.registry.default_registry`, so the
composer hands them the stringified value (``""`` for missing / falsy values).

Names follow the camelCase vocabulary used in schema declarations
(``isEmail``, ``len``, ``matches`` ...).
"""

from __future__ import annotations

import re
import uuid
from typing import Any, Callable, Optional

from . import utils

__all__ = ["STRING_PREDICATES"]

# --------------------------------------------------------------------------- #
# Patterns                                                                    #
# --------------------------------------------------------------------------- #

_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)
_URL_RE = re.compile(
    r"^(?:https?|ftp)://"
    r"(?:[^\s:@/]+(?::[^\s:@/]*)?@)?"
    r"(?:localhost|(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}|\d{1,3}(?:\.\d{1,3}){3})"
    r"(?::\d{1,5})?(?:[/?#]\S*)?$"
)
_INT_RE = re.compile(r"^[-+]?(?:0|[1-9]\d*)$")
_FLOAT_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
_NUMERIC_RE = re.compile(r"^[-+]?(?:\d*\.)?\d+$")
_ALPHA_RE = re.compile(r"^[A-Za-z]+$")
_ALNUM_RE = re.compile(r"^[A-Za-z0-9]+$")

_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def _compile(pattern: str, flags: str = "") -> re.Pattern:
    bits = 0
    for letter in flags or "":
        # "g" and "u" carry no meaning for a single search
        bits |= _FLAGS.get(letter, 0)
    return re.compile(pattern, bits)


# --------------------------------------------------------------------------- #
# Predicates                                                                  #
# --------------------------------------------------------------------------- #

def equals(value: str, comparison: Any) -> bool:
    return value == comparison


def contains(value: str, seed: Any) -> bool:
    return str(seed) in value


def matches(value: str, pattern: str, flags: str = "") -> bool:
    return _compile(pattern, flags).search(value) is not None


def not_matches(value: str, pattern: str, flags: str = "") -> bool:
    return not matches(value, pattern, flags)


def length(value: str, min_len: int = 0, max_len: Optional[int] = None) -> bool:
    """Length of *value* lies in ``[min_len, max_len]`` (no upper bound if omitted)."""
    return len(value) >= min_len and (max_len is None or len(value) <= max_len)


def is_email(value: str) -> bool:
    return len(value) <= 254 and _EMAIL_RE.match(value) is not None


def is_url(value: str) -> bool:
    return _URL_RE.match(value) is not None


def is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return len(value) == 36


def is_boolean(value: str) -> bool:
    return value in ("true", "false", "1", "0")


def is_int(value: str) -> bool:
    return _INT_RE.match(value) is not None


def is_float(value: str) -> bool:
    return _FLOAT_RE.match(value) is not None


def is_numeric(value: str) -> bool:
    return _NUMERIC_RE.match(value) is not None


def is_alpha(value: str) -> bool:
    return _ALPHA_RE.match(value) is not None


def is_alphanumeric(value: str) -> bool:
    return _ALNUM_RE.match(value) is not None


def is_lowercase(value: str) -> bool:
    return value == value.lower()


def is_uppercase(value: str) -> bool:
    return value == value.upper()


def is_in(value: str, *options: Any) -> bool:
    return value in [str(o) for o in options]


def is_empty(value: str) -> bool:
    return value == ""


STRING_PREDICATES: dict[str, Callable[..., bool]] = {
    "equals": equals,
    "contains": contains,
    "matches": matches,
    "is": matches,
    "not": not_matches,
    "len": length,
    "isEmail": is_email,
    "isURL": is_url,
    "isUUID": is_uuid,
    "isDate": utils._is_date,
    "isISO8601": utils._is_date,
    "isBoolean": is_boolean,
    "isInt": is_int,
    "isFloat": is_float,
    "isNumeric": is_numeric,
    "isAlpha": is_alpha,
    "isAlphanumeric": is_alphanumeric,
    "isLowercase": is_lowercase,
    "isUppercase": is_uppercase,
    "isIn": is_in,
    "isEmpty": is_empty,
}
