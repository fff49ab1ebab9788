"""
validator.py - recursive tree validation
========================================

The schema is flattened once per call (see :mod:`payload_schema.schema`) and
the value is walked against the flat table.  Entries whose path crosses an
array (``roles.[].name``) are replayed against every element of that array, so
error paths always carry concrete indices (``roles.1.name``).

Public API
----------
SchemaError
    Raised when the value or schema handed in is malformed.

ValidationErrors
    Raised when the value violates the schema; ``.errors`` lists every
    violation in traversal order.

validate(value, schema, *, registry=None) -> True
check(value, schema, *, registry=None) -> list[ValidationErrorItem]
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple

from . import utils
from .composer import compose_validators, schema_to_validators, type_validator
from .errors import SchemaError, ValidationErrorItem, ValidationErrors
from .paths import (
    WILDCARD,
    Segment,
    get_in,
    has_wildcard,
    segments_to_path,
)
from .registry import PredicateRegistry, default_registry
from .schema import FieldRule, FlatEntry, flatten_schema

__all__ = [
    "SchemaError",
    "ValidationErrorItem",
    "ValidationErrors",
    "walk",
    "check",
    "validate",
]

log = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Core recursive validator                                                    #
# --------------------------------------------------------------------------- #

def _field_check(field: str, rule: FieldRule, registry: Optional[PredicateRegistry]):
    validators = []
    if rule.type is not None:
        validators.append(type_validator(field, rule.type))
    if rule.validate:
        validators.extend(schema_to_validators(field, rule.validate, registry))
    return compose_validators(validators)


def _required(field: str, value: Any) -> ValidationErrorItem:
    return ValidationErrorItem(
        f"Validation required on {field} failed",
        path=field,
        value=value,
        validator_key="required",
        validator_name="required",
        validator_args=[],
    )


def walk(
    value: Any,
    table: Sequence[FlatEntry],
    prefix: Tuple[Segment, ...] = (),
    registry: Optional[PredicateRegistry] = None,
) -> list[ValidationErrorItem]:
    """Validate *value* against a flat rule *table* and return every violation.

    Entries that address a field (or ``$``) are checked first, in table order.
    Entries that cross an array are then split at the first ``[]``: the part
    before it locates the array, the part after it is walked once per element
    with the element index spliced into *prefix*.
    """
    direct: list[FlatEntry] = []
    deferred: list[FlatEntry] = []
    for entry in table:
        if has_wildcard(entry.segments):
            deferred.append(entry)
        else:
            direct.append(entry)

    errs: list[ValidationErrorItem] = []

    # 1) fields of the current container ------------------------------------
    for entry in direct:
        field = segments_to_path(prefix + entry.segments, remove_wildcards=True) or "$"
        target = get_in(value, entry.segments)
        if target is None:
            if not entry.rule.allow_null:
                errs.append(_required(field, target))
            continue
        result = _field_check(field, entry.rule, registry)(target)
        if isinstance(result, ValidationErrorItem):
            errs.append(result)

    # 2) array elements -----------------------------------------------------
    for entry in deferred:
        at = entry.segments.index(WILDCARD)
        before, after = entry.segments[:at], entry.segments[at + 1:]
        arr = get_in(value, before)
        if not isinstance(arr, (list, tuple)) or not arr:
            continue
        sub_table = [FlatEntry(segments_to_path(after) or "$", after, entry.rule)]
        for i, element in enumerate(arr):
            errs.extend(walk(element, sub_table, prefix + before + (i,), registry))

    return errs


# --------------------------------------------------------------------------- #
# Public entry points                                                         #
# --------------------------------------------------------------------------- #

def _preconditions(value: Any, schema: Any) -> None:
    if value is None or not utils._is_container(value):
        raise SchemaError("object to validate should be an object or an array")
    if schema is None or not isinstance(schema, Mapping):
        raise SchemaError("schema should be valid")


def check(
    value: Any,
    schema: Mapping[str, Any],
    *,
    registry: Optional[PredicateRegistry] = None,
    prefix: Tuple[Segment, ...] = (),
) -> list[ValidationErrorItem]:
    """Like :func:`validate` but return the (possibly empty) error list."""
    _preconditions(value, schema)
    if registry is None:
        registry = default_registry()
    errors = walk(value, flatten_schema(schema), tuple(prefix), registry)
    log.debug("validated %s: %d error(s)", type(value).__name__, len(errors))
    return errors


def validate(
    value: Any,
    schema: Mapping[str, Any],
    *,
    registry: Optional[PredicateRegistry] = None,
    prefix: Tuple[Segment, ...] = (),
) -> bool:
    """Validate *value* against *schema*; return True or raise :class:`ValidationErrors`.

    *registry* supplies named predicates (defaults to the bundled string
    predicates); ``allowedKeys``, ``size`` and ``isString`` are always
    available, as are ad-hoc callables given directly in ``validate``.
    *prefix* is prepended to every error path.
    """
    errors = check(value, schema, registry=registry, prefix=prefix)
    if errors:
        raise ValidationErrors(errors)
    return True
