# payload_schema/card.py
from __future__ import annotations
from typing import Any, Iterable, Sequence

from .errors import ValidationErrorItem

__all__ = ["to_markdown_card"]

def _format_scalar(v: Any) -> str:
    """Return a Markdown-safe scalar string."""
    if v is True:   return "true"
    if v is False:  return "false"
    if v is None:   return "null"
    if isinstance(v, str):
        return f"`{v}`" if v else '`""`'
    return str(v)

def _format_list(v: Sequence[Any]) -> str:
    """Return a bulleted Markdown list (no surrounding blank lines)."""
    return "\n".join(f"- {item}" for item in v)

def to_markdown_card(errors: Iterable[ValidationErrorItem], *, heading_level: int = 2) -> str:
    """
    Convert a list of validation errors into a Markdown card.

    Parameters
    ----------
    errors : Iterable[ValidationErrorItem]
        Typically ``ValidationErrors.errors``; one section per error, in order.
    heading_level : int, default 2
        Markdown heading level for each error path (##, ###, …).

    Returns
    -------
    str
        Markdown document.
    """
    h = "#" * heading_level
    parts: list[str] = []
    for err in errors:
        parts.append(f"{h} {err.path or '$'}")
        bullets = [
            f"**message**: {err.message}",
            f"**validator**: {err.validator_name}",
            f"**value**: {_format_scalar(err.value)}",
        ]
        if err.validator_args:
            bullets.append(f"**arguments**: {', '.join(_format_scalar(a) for a in err.validator_args)}")
        parts.append(_format_list(bullets))
        parts.append("")             # blank line after each section
    return "\n".join(parts).rstrip()
