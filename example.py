#!/usr/bin/env python
"""
example.py
==========
Demonstration of the **payload_schema** library.

This example demonstrates:
--------------------------
1. **Whole-object predicates**: ``$`` with a custom cross-field check and
   ``allowedKeys``
2. **Nullable fields**: ``allowNull`` short-circuits every other validator
3. **Nested objects and arrays**: ``type: object`` / ``type: array`` with a
   per-element ``schema``
4. **Error aggregation**: every violation is reported at once, each with a
   concrete path such as ``roles.1.name``
5. **Reports**: the same errors rendered as a Markdown card
"""
from __future__ import annotations

import logging

from payload_schema import ValidationErrors, to_markdown_card, validate

# --------------------------------------------------------------------------- #
# Logging Configuration                                                       #
# --------------------------------------------------------------------------- #
logging.basicConfig(
    level="INFO",
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger("payload_schema.examples")

# --------------------------------------------------------------------------- #
# Input: missing an email or a phone, one bad role, one bad setting           #
# --------------------------------------------------------------------------- #
bad_user_input = {
    "roles": [
        # this one is ok
        {"name": "ADMIN", "until": "2019-12-05T16:42:40.069Z"},
        {"name": "toolongandlowercase", "extraKey": "aïe"},
    ],
    "settings": {
        "optinNewsletter": "should be a boolean",
    },
}

# --------------------------------------------------------------------------- #
# Schema                                                                      #
# --------------------------------------------------------------------------- #
schema = {
    "$": {
        "validate": {
            # custom predicate, named freely; it receives the value at the
            # key's path ("$" is the whole object)
            "oneOf": lambda o: o.get("email") or o.get("phone"),
            # disallow extra keys
            "allowedKeys": ["email", "phone", "settings", "roles"],
        },
    },
    "email": {
        # when allowNull is set and the input is null, validators are not called
        "allowNull": True,
        "validate": {"isEmail": True},
    },
    "phone": {
        "allowNull": True,
    },
    "settings": {
        "type": "object",
        "schema": {
            "optinNewsletter": {
                "type": "string",
                "validate": {"isBoolean": True},
            },
        },
    },
    "roles": {
        "type": "array",
        "schema": {
            "$": {"validate": {"allowedKeys": ["name", "until"]}},
            "name": {
                "type": "string",
                "validate": {"len": [3, 50], "matches": "^[A-Z]+$"},
            },
            "until": {
                "allowNull": True,
                "validate": {"isDate": True},
            },
        },
    },
}

# --------------------------------------------------------------------------- #
# Validate                                                                    #
# --------------------------------------------------------------------------- #
try:
    validate(bad_user_input, schema)
except ValidationErrors as e:
    log.warning("%d violation(s) found", len(e))
    for err in e.errors:
        log.info(
            "%-28s %-12s value=%r args=%r",
            err.path, err.validator_name, err.value, err.validator_args,
        )
    print(to_markdown_card(e.errors))
