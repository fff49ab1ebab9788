"""
errors.py - exception types raised by payload-schema
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

__all__ = [
    "SchemaError",
    "ValidationErrorItem",
    "ValidationErrors",
]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when the value or the schema handed to `validate` is malformed.

    This signals a programming error and is never aggregated.
    """


class ValidationErrorItem(Exception):
    """One violation found while walking a value.

    Ad-hoc predicates may return or raise an instance of this class to report
    their own message, path or value; it is then collected as-is.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Any = None,
        value: Any = None,
        validator_key: Optional[str] = None,
        validator_name: Optional[str] = None,
        validator_args: Optional[Sequence[Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message or ""
        self.path = path
        self.value = value
        self.validator_key = validator_key
        self.validator_name = validator_name or validator_key
        self.validator_args = list(validator_args) if validator_args is not None else []
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        out = {
            "message": self.message,
            "path": self.path,
            "value": self.value,
            "validator_key": self.validator_key,
            "validator_name": self.validator_name,
            "validator_args": list(self.validator_args),
        }
        if self.cause is not None:
            out["cause"] = repr(self.cause)
        return out

    def __repr__(self) -> str:
        return (
            f"ValidationErrorItem(path={self.path!r}, "
            f"validator={self.validator_key!r}, value={self.value!r})"
        )


class ValidationErrors(ValueError):
    """Aggregate raised by `validate`: every violation, in traversal order."""

    def __init__(self, errors: Sequence[ValidationErrorItem]):
        self.errors = list(errors)
        paths = ", ".join(str(e.path) for e in self.errors[:5])
        more = "" if len(self.errors) <= 5 else ", ..."
        super().__init__(f"{len(self.errors)} validation error(s): {paths}{more}")

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ValidationErrorItem]:
        return iter(self.errors)

    def to_list(self) -> list[dict[str, Any]]:
        return [e.to_dict() for e in self.errors]
