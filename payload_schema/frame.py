"""
frame.py - validate tabular payloads row by row
===============================================

Every row of a :class:`pandas.DataFrame` is validated as one record against
the same schema.  Missing cells (``NaN`` / ``NaT`` / ``None``) count as absent,
so ``allowNull`` decides whether they are errors.  Error paths start with the
row position: ``"3.email"``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import pandas as pd

from .errors import SchemaError, ValidationErrorItem, ValidationErrors
from .registry import PredicateRegistry, default_registry
from .schema import flatten_schema
from . import validator

__all__ = ["frame_records", "check_frame", "validate_frame"]

log = logging.getLogger(__name__)


def frame_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Rows of *df* as plain dicts, missing cells mapped to None.

    Columns are first given nullable dtypes, so an integer column with a gap
    still yields ints rather than floats.
    """
    typed = df.convert_dtypes()
    cleaned = typed.astype(object).where(pd.notna(typed), None)
    return cleaned.to_dict(orient="records")


def check_frame(
    df: pd.DataFrame,
    schema: Mapping[str, Any],
    *,
    registry: Optional[PredicateRegistry] = None,
) -> list[ValidationErrorItem]:
    if not isinstance(df, pd.DataFrame):
        raise SchemaError(f"expected a pandas DataFrame, got {type(df).__name__}")
    if not isinstance(schema, Mapping):
        raise SchemaError("schema should be valid")
    if registry is None:
        registry = default_registry()

    table = flatten_schema(schema)
    errors: list[ValidationErrorItem] = []
    for i, record in enumerate(frame_records(df)):
        errors.extend(validator.walk(record, table, (i,), registry))
    log.debug("validated frame of %d row(s): %d error(s)", len(df), len(errors))
    return errors


def validate_frame(
    df: pd.DataFrame,
    schema: Mapping[str, Any],
    *,
    registry: Optional[PredicateRegistry] = None,
) -> bool:
    """Validate every row of *df*; return True or raise one :class:`ValidationErrors`."""
    errors = check_frame(df, schema, registry=registry)
    if errors:
        raise ValidationErrors(errors)
    return True
