import copy
import json
import unittest

from payload_schema import Contract, loader
from payload_schema.errors import SchemaError, ValidationErrors
from payload_schema.registry import PredicateRegistry
from tests._util import paths, tmp_json


class ContractTests(unittest.TestCase):
    def setUp(self):
        self.contract = Contract.load("user_payload.json")
        self.payload  = {
            "username": "cyppan",
            "email":    "cyppan@email.com",
            "settings": {"locale": "fr", "optinNewsletter": True},
            "roles":    [{"name": "ADMIN", "until": "2019-12-05T16:42:40.069Z"}],
        }

    def test_metadata(self):
        self.assertEqual(self.contract.title, "User Payload")
        self.assertEqual(self.contract.version, "1.0.0")

    def test_valid_payload(self):
        self.assertTrue(self.contract.validate(self.payload))
        self.assertEqual(self.contract.check(self.payload), [])

    def test_bad_payload_reports_every_violation(self):
        bad = {
            "roles": [
                {"name": "ADMIN", "until": "2019-12-05T16:42:40.069Z"},
                {"name": "toolongandlowercase", "extraKey": "aïe"},
            ],
            "settings": {"optinNewsletter": "should be a boolean"},
            "nickname": "x",
        }
        with self.assertRaises(ValidationErrors) as ctx:
            self.contract.validate(bad)
        self.assertEqual(paths(ctx.exception.errors), [
            "$",
            "username",
            "email",
            "settings.optinNewsletter",
            "roles.1",
            "roles.1.name",
        ])

    def test_parse_and_validate_from_json_text(self):
        out = self.contract.parse_and_validate(json.dumps(self.payload))
        self.assertEqual(out, self.payload)

    def test_parse_and_validate_fails_on_invalid_data(self):
        bad_payload = copy.deepcopy(self.payload)
        bad_payload.pop("email")  # Remove a required field
        with self.assertRaises(ValidationErrors):
            self.contract.parse_and_validate(bad_payload)

    def test_registry_is_used(self):
        contract = Contract("t", "d", "1", {"a": {"validate": {"isEmail": True}}}, registry=PredicateRegistry())
        with self.assertRaises(SchemaError):
            contract.validate({"a": "x@y.io"})

    def test_contract_load_fails_when_keys_missing(self):
        bad = copy.deepcopy(loader.load_schema("user_payload.json"))
        bad.pop("description")

        p = tmp_json(bad)
        try:
            with self.assertRaises(ValueError):
                Contract.load(p)
        finally:
            p.unlink(missing_ok=True)

    def test_contract_rejects_non_mapping_schema(self):
        with self.assertRaises(SchemaError):
            Contract("t", "d", "1", ["not", "a", "mapping"])


if __name__ == "__main__":
    unittest.main()
