"""Shared helpers for the payload-schema test-suite (std-lib only)."""
from __future__ import annotations

import contextlib
import copy
import json
import tempfile
from pathlib import Path
from typing import Any

# ------------------------------------------------------------------ #
# Shared schemas                                                      #
# ------------------------------------------------------------------ #
USER_SCHEMA: dict[str, Any] = {
    "username": {
        "allowNull": False,
        "validate": {
            "isString": True,
            "is": ["^[a-zA-Z0-9]+$", "i"],
            "len": [5, 50],
        },
    },
    "random": {
        "allowNull": True,
    },
    "email": {
        "allowNull": False,
        "validate": {
            "isString": True,
            "isEmail": True,
        },
    },
    "roles": {
        "type": "array",
        "allowNull": True,
        "validate": {
            "size": [1, 9999],
        },
        "schema": {
            "$": {
                "validate": {
                    "isString": True,
                },
            },
        },
    },
}

NESTED_SCHEMA: dict[str, Any] = {
    "settings": {
        "type": "object",
        "schema": {
            "locale": {
                "validate": {
                    "isString": True,
                    "equals": "fr",
                },
            },
        },
    },
}

NESTED_ARRAY_SCHEMA: dict[str, Any] = {
    "roles": {
        "type": "array",
        "schema": {
            "name": {
                "validate": {
                    "len": [3, 10],
                    "matches": ["^[A-Z]+$"],
                },
            },
            "until": {
                "allowNull": True,
                "validate": {
                    "isDate": True,
                },
            },
            "$": {
                "validate": {
                    "allowedKeys": ["name", "until"],
                },
            },
        },
    },
}

TYPES_SCHEMA: dict[str, Any] = {
    tag: {"type": tag, "allowNull": True}
    for tag in ("string", "integer", "float", "boolean", "object", "array")
}


def schema(name: str) -> dict[str, Any]:
    """Return a deep copy of one of the shared schemas above."""
    return copy.deepcopy(globals()[name])

# ------------------------------------------------------------------ #
# Tiny helpers                                                       #
# ------------------------------------------------------------------ #
def tmp_json(obj: Any) -> Path:
    """Write *obj* to a temp file and return its Path (caller must unlink)."""
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    fh.close()
    Path(fh.name).write_text(json.dumps(obj), encoding="utf-8")
    return Path(fh.name)

@contextlib.contextmanager
def tmp_dir():
    """Yield a temporary directory Path that auto-cleans on exit."""
    td = tempfile.TemporaryDirectory()
    try:
        yield Path(td.name)
    finally:
        td.cleanup()

def paths(errors) -> list[str]:
    return [e.path for e in errors]

def keys(errors) -> list[str]:
    return [e.validator_key for e in errors]
