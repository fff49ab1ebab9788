"""
loader.py - read JSON schema contracts from disk or package data.

Public API
----------
load_schema() : function helper to obtain a fresh copy
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _parse(text: str, origin: str) -> Any:
    """Parse JSON text, raising crisp errors on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {origin}: {exc}") from exc


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_schema(path: str | Path) -> dict:
    p = Path(path)

    # 1) direct file on disk ------------------------------------------------
    if p.is_file():
        log.debug("loading schema from %s", p)
        return _parse(p.read_text(encoding="utf-8"), str(p))

    # 2) bundled resource (exact string or basename) -----------------------
    pkg = resources.files("payload_schema.schemas")
    candidates = (Path(path).name, str(path))   # basename first, original second
    for name in candidates:
        try:
            text = pkg.joinpath(name).read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError):
            continue   # try the next candidate
        log.debug("loading bundled schema %s", name)
        return _parse(text, name)

    # 3) give up -----------------------------------------------------------
    raise FileNotFoundError(
        f"Schema '{path}' not found on disk or in package data"
    )
