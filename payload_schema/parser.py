"""
parser.py - command-line / JSON / mapping input loader
======================================================

Public API
----------
`build_arg_parser() -> argparse.ArgumentParser`
    The ``python -m payload_schema`` command line.

`parse_input(source) -> Any`
    Convert user-supplied *source* (Mapping / list / Path / JSON file path /
    JSON literal) into the plain value to validate.

`main(argv=None) -> int`
    Run the command line; exit status 0 = valid, 1 = invalid, 2 = usage or
    schema fault.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from . import __version__
from .card import to_markdown_card
from .errors import SchemaError, ValidationErrors

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Input parsing utility                                                       #
# --------------------------------------------------------------------------- #

def parse_input(source: str | Path | Mapping[str, Any] | Sequence[Any]) -> Any:
    """Convert *source* to the raw value to validate (no validation).

    Parameters
    ----------
    source
        Supported variants:
        * ``Mapping`` - copied directly.
        * ``list`` / ``tuple`` - copied directly.
        * ``Path`` - JSON file on disk.
        * ``str``  - existing file path → load; else JSON literal → load.
    """

    # Mapping / array - already plain data ----------------------------------
    if isinstance(source, Mapping):
        return dict(source)
    if isinstance(source, (list, tuple)):
        return list(source)

    # Path - read JSON file -------------------------------------------------
    if isinstance(source, Path):
        return _load_json(source.read_text(encoding="utf-8"), str(source))

    if isinstance(source, str):
        p = Path(source)
        if p.is_file():
            return _load_json(p.read_text(encoding="utf-8"), source)
        return _load_json(source, "input")

    raise TypeError(f"Unsupported type for parse_input: {type(source)}")


def _load_json(text: str, origin: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {origin}: {exc}") from exc


# --------------------------------------------------------------------------- #
# Command line                                                                #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="payload_schema",
        description="Validate a JSON payload against a payload-schema contract.",
        fromfile_prefix_chars="@",
    )
    p.add_argument("--version", action="version", version=f"payload-schema {__version__}")
    p.add_argument(
        "--schema",
        metavar="FILE",
        required=True,
        help="JSON contract (title/description/version/schema) on disk or bundled.",
    )
    p.add_argument(
        "input",
        nargs="?",
        help="JSON file or JSON literal to validate; read from stdin when omitted.",
    )
    p.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Error report format.",
    )
    p.add_argument(
        "--verbosity",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level.",
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    from .contract import Contract

    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.verbosity),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    try:
        contract = Contract.load(args.schema)
        source = args.input if args.input is not None else sys.stdin.read()
        contract.parse_and_validate(source)
    except ValidationErrors as exc:
        log.info("%s: %d violation(s)", args.schema, len(exc))
        if args.format == "markdown":
            print(to_markdown_card(exc.errors))
        else:
            print(json.dumps(exc.to_list(), indent=2, ensure_ascii=False, default=str))
        return 1
    except (SchemaError, ValueError, FileNotFoundError) as exc:
        log.error("%s", exc)
        return 2

    log.info("%s: valid", args.schema)
    return 0
