"""
composer.py - turn a field's ``validate`` mapping into one check
================================================================

``{"isString": True, "len": [5, 50], "oneOf": lambda o: ...}`` becomes a list
of single-predicate checks which :func:`compose_validators` chains into one:
checks run in declaration order and the first failure wins.

Each entry is resolved once into a :class:`ValidatorSpec`:

* ``True``            -> named predicate, no extra arguments
* list / tuple        -> named predicate, items spread as arguments
* any other literal   -> named predicate, one argument
* a callable          -> ad-hoc predicate (only when the name is not known)
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from . import utils
from .errors import SchemaError, ValidationErrorItem
from .registry import EXTRA_PREDICATES, Predicate, PredicateRegistry

__all__ = [
    "ArgKind",
    "ValidatorSpec",
    "Check",
    "resolve_validator",
    "schema_to_validators",
    "type_validator",
    "compose_validators",
]

log = logging.getLogger(__name__)

CheckResult = Union[bool, ValidationErrorItem]
Check = Callable[[Any], CheckResult]


class ArgKind(enum.Enum):
    NO_ARGS = "no_args"
    SINGLE = "single"
    MULTI = "multi"
    ADHOC = "adhoc"


@dataclass(frozen=True)
class ValidatorSpec:
    name: str
    predicate: Predicate
    kind: ArgKind
    args: Tuple[Any, ...] = ()
    string: bool = False


def resolve_validator(name: str, arg_spec: Any, registry: Optional[PredicateRegistry] = None) -> ValidatorSpec:
    """Resolve one ``validate`` entry against *registry*, then the core extras."""
    entry = (registry.lookup(name) if registry is not None else None) or EXTRA_PREDICATES.lookup(name)
    if entry is None:
        if callable(arg_spec):
            return ValidatorSpec(name, arg_spec, ArgKind.ADHOC)
        raise SchemaError(f"unknown validator {name!r} (not registered and not callable)")

    if arg_spec is True:
        return ValidatorSpec(name, entry.fn, ArgKind.NO_ARGS, (), entry.string)
    if isinstance(arg_spec, (list, tuple)):
        return ValidatorSpec(name, entry.fn, ArgKind.MULTI, tuple(arg_spec), entry.string)
    return ValidatorSpec(name, entry.fn, ArgKind.SINGLE, (arg_spec,), entry.string)


def _failure(spec_name: str, field: str, value: Any, args: Sequence[Any], cause: Optional[BaseException] = None) -> ValidationErrorItem:
    return ValidationErrorItem(
        f"Validation {spec_name} on {field} failed",
        path=field,
        value=value,
        validator_key=spec_name,
        validator_name=spec_name,
        validator_args=args,
        cause=cause,
    )


def _to_check(spec: ValidatorSpec, field: str) -> Check:
    def check(value: Any) -> CheckResult:
        subject = utils._stringify(value) if spec.string else value
        try:
            result = spec.predicate(subject, *spec.args)
        except ValidationErrorItem as item:
            result = item
        except Exception as exc:
            # only ad-hoc predicates are trusted to fail on data; the rest propagate
            if spec.kind is not ArgKind.ADHOC:
                raise
            log.debug("validator %s on %s raised %r", spec.name, field, exc)
            return _failure(spec.name, field, subject, spec.args, cause=exc)

        if isinstance(result, ValidationErrorItem):
            if result.path is None:
                result.path = field
            return result
        if isinstance(result, BaseException):
            raise TypeError(
                f"validator {spec.name!r} returned {type(result).__name__}; "
                "predicates return a truth value or a ValidationErrorItem"
            )
        return True if result else _failure(spec.name, field, subject, spec.args)

    return check


def type_validator(field: str, tag: str) -> Check:
    """Check that the value matches the ``type`` tag declared on the rule."""
    def check(value: Any) -> CheckResult:
        if utils._check_type(value, tag):
            return True
        return _failure("type", field, value, [tag])

    return check


def schema_to_validators(
    field: str,
    validate: Mapping[str, Any],
    registry: Optional[PredicateRegistry] = None,
) -> list[Check]:
    """Given ``{"isEmail": True, "len": [1, 50]}`` return one check per entry."""
    return [_to_check(resolve_validator(name, arg_spec, registry), field) for name, arg_spec in validate.items()]


def compose_validators(validators: Sequence[Check]) -> Check:
    """Chain *validators*; the result returns the first failure or True."""
    validators = list(validators)

    def composed(value: Any) -> CheckResult:
        for validator in validators:
            result = validator(value)
            if isinstance(result, ValidationErrorItem):
                return result
        return True

    return composed
