"""
schema.py - schema declarations and the flat rule table
=======================================================

A schema declaration is a plain mapping of field key -> field rule::

    {
        "username": {"allowNull": False, "validate": {"isString": True, "len": [5, 50]}},
        "roles": {
            "type": "array",
            "validate": {"size": [1, 9999]},
            "schema": {
                "$":    {"validate": {"allowedKeys": ["name", "until"]}},
                "name": {"validate": {"len": [3, 10]}},
            },
        },
    }

Public API
----------
FieldRule
    Parsed form of one rule (``type``, ``allowNull``, ``validate``, ``schema``).

parse_schema(schema: Mapping) -> dict[str, FieldRule]
    Parse a declaration recursively, rejecting malformed rules.

flatten_schema(schema) -> list[FlatEntry]
    Flatten nested ``object`` / ``array`` declarations into one table keyed
    by full dotted path, ``[]`` standing for "every element".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple, Optional, Tuple

from . import utils
from .errors import SchemaError
from .paths import WILDCARD, Segment, path_to_segments, segments_to_path

__all__ = [
    "FieldRule",
    "FlatEntry",
    "parse_schema",
    "flatten_schema",
]

log = logging.getLogger(__name__)

_NESTED_TYPES = ("object", "array")


# --------------------------------------------------------------------------- #
# Declarations                                                                #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class FieldRule:
    """One node of a schema declaration."""

    type: Optional[str] = None
    allow_null: bool = False
    validate: Optional[Mapping[str, Any]] = None
    schema: Optional[Mapping[str, "FieldRule"]] = None
    # whether the author said anything this rule should enforce on its own path
    enforced: bool = field(default=True, compare=False)

    @classmethod
    def from_mapping(cls, raw: Any, *, key: str = "") -> "FieldRule":
        if isinstance(raw, FieldRule):
            return raw
        if not isinstance(raw, Mapping):
            raise SchemaError(f"{key}: field rule should be a mapping, got {type(raw).__name__}")

        tag = raw.get("type")
        if tag is not None and tag not in utils._TYPE_MAP:
            raise SchemaError(f"{key}: unknown type {tag!r}; expected one of {sorted(utils._TYPE_MAP)}")

        validate = raw.get("validate")
        if validate is not None and not isinstance(validate, Mapping):
            raise SchemaError(f"{key}: 'validate' should be a mapping of validator name -> arguments")

        nested = raw.get("schema")
        if nested is not None and not isinstance(nested, Mapping):
            raise SchemaError(f"{key}: 'schema' should be a mapping")

        return cls(
            type=tag,
            allow_null=bool(raw.get("allowNull", False)),
            validate=dict(validate) if validate is not None else None,
            schema=nested,
            enforced=any(k in raw for k in ("validate", "type", "allowNull")),
        )

    @property
    def nested(self) -> bool:
        return self.type in _NESTED_TYPES and self.schema is not None


def parse_schema(schema: Mapping[str, Any], *, _prefix: str = "", _seen: Tuple[int, ...] = ()) -> dict[str, FieldRule]:
    """Parse *schema* into ``{key: FieldRule}``; nested schemas are parsed too."""
    if not isinstance(schema, Mapping):
        raise SchemaError(f"{_prefix or 'schema'}: schema should be a mapping")
    if id(schema) in _seen:
        raise SchemaError(f"{_prefix}: cyclic schema declaration")
    seen = _seen + (id(schema),)

    parsed: dict[str, FieldRule] = {}
    for key, raw in schema.items():
        if not isinstance(key, str) or not key:
            raise SchemaError(f"{_prefix}: field keys should be non-empty strings, got {key!r}")
        where = f"{_prefix}.{key}" if _prefix else key
        rule = FieldRule.from_mapping(raw, key=where)
        if rule.schema is not None:
            child = parse_schema(rule.schema, _prefix=where, _seen=seen)
            rule = FieldRule(
                type=rule.type,
                allow_null=rule.allow_null,
                validate=rule.validate,
                schema=child,
                enforced=rule.enforced,
            )
        parsed[key] = rule
    return parsed


# --------------------------------------------------------------------------- #
# Flattening                                                                  #
# --------------------------------------------------------------------------- #

class FlatEntry(NamedTuple):
    path: str
    segments: Tuple[Segment, ...]
    rule: FieldRule


def _flatten(schema: Mapping[str, FieldRule], prefix: Tuple[Segment, ...]) -> list[FlatEntry]:
    flat: list[FlatEntry] = []
    for key, rule in schema.items():
        # a lone "$" or "[]" is the container the prefix already points at
        segments = path_to_segments(key)
        path = prefix if segments == (WILDCARD,) else prefix + segments

        if rule.nested:
            child_prefix = path if rule.type == "object" else path + (WILDCARD,)
            flat.extend(_flatten(rule.schema, child_prefix))

        if rule.enforced:
            flat.append(FlatEntry(segments_to_path(path) or "$", path, rule))
    return flat


def flatten_schema(schema: Mapping[str, Any]) -> list[FlatEntry]:
    """Return the flat rule table of *schema*.

    Children are listed before the rule that declares them.  Nothing is
    deduplicated: every rule that enforces something gets its own entry,
    even when two of them end up on the same path.

    Fields of a nested ``object`` are plain dotted paths, so when the object
    itself is absent each required child reports ``required`` as well as the
    object's own rule (``settings.locale`` and ``settings``).  Fields under an
    ``array`` are only walked for elements that exist.
    """
    parsed = parse_schema(schema)
    flat = _flatten(parsed, ())
    log.debug("flattened schema into %d entries: %s", len(flat), [e.path for e in flat])
    return flat
