"""
contract.py - High-level API for interacting with schema contracts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from . import loader
from . import parser
from . import validator
from .errors import SchemaError, ValidationErrorItem
from .registry import PredicateRegistry

_REQUIRED_KEYS = ("title", "description", "version", "schema")


class Contract:
    """A named, versioned schema declaration plus the registry it runs with."""

    def __init__(
        self,
        title: str,
        description: str,
        version: str,
        schema: Mapping[str, Any],
        registry: Optional[PredicateRegistry] = None,
    ):
        if not isinstance(schema, Mapping):
            raise SchemaError(f"Contract '{title}': schema should be a mapping")
        self.title = title
        self.description = description
        self.version = version
        self.schema = schema
        self.registry = registry

    @classmethod
    def load(cls, path: str | Path, *, registry: Optional[PredicateRegistry] = None) -> "Contract":
        """Loads a contract from a JSON file (or bundled resource) and returns a Contract instance."""
        data = loader.load_schema(path)
        if not isinstance(data, Mapping) or not all(key in data for key in _REQUIRED_KEYS):
            raise ValueError(
                f"Schema at '{path}' is not a valid contract. "
                f"Required keys: {', '.join(repr(k) for k in _REQUIRED_KEYS)}."
            )
        return cls(
            title=data["title"],
            description=data["description"],
            version=data["version"],
            schema=data["schema"],
            registry=registry,
        )

    def check(self, value: Any) -> list[ValidationErrorItem]:
        """Return every violation of *value* (empty list when valid)."""
        return validator.check(value, self.schema, registry=self.registry)

    def validate(self, value: Any) -> bool:
        """Return True or raise :class:`~payload_schema.errors.ValidationErrors`."""
        return validator.validate(value, self.schema, registry=self.registry)

    def parse_and_validate(self, source: Any) -> Any:
        """
        End-to-end helper used by the CLI.
        1. Convert *source* into a plain value (Mapping / Path / JSON file / JSON text).
        2. Deep-validate the result.
        3. Return the validated value.
        """
        value = parser.parse_input(source)
        self.validate(value)
        return value

    def __repr__(self) -> str:
        return f"Contract(title={self.title!r}, version={self.version!r})"
