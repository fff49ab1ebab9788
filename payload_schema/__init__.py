"""
payload_schema – declarative validation of nested payloads (objects, arrays, scalars).
"""
__version__ = "1.0.0"

from .errors import SchemaError, ValidationErrorItem, ValidationErrors
from .registry import PredicateRegistry, default_registry
from .validator import check, validate
from .contract import Contract
from .parser import parse_input
from .card import to_markdown_card

__all__ = [
    "Contract",
    "PredicateRegistry",
    "SchemaError",
    "ValidationErrorItem",
    "ValidationErrors",
    "check",
    "default_registry",
    "parse_input",
    "to_markdown_card",
    "validate",
]
