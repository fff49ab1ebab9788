import unittest

import numpy as np
import pandas as pd

from payload_schema.errors import SchemaError, ValidationErrors
from payload_schema.frame import check_frame, frame_records, validate_frame
from tests._util import paths, keys


class FrameTests(unittest.TestCase):
    def setUp(self):
        self.schema = {
            "name":  {"type": "string", "validate": {"len": [3, 10]}},
            "age":   {"type": "integer", "allowNull": True},
            "email": {"allowNull": True, "validate": {"isEmail": True}},
        }

    def test_records_map_missing_cells_to_none(self):
        df = pd.DataFrame({"name": ["ann", None], "score": [1.5, np.nan]})
        records = frame_records(df)
        self.assertEqual(records[0], {"name": "ann", "score": 1.5})
        self.assertIsNone(records[1]["name"])
        self.assertIsNone(records[1]["score"])

    def test_valid_frame(self):
        df = pd.DataFrame({
            "name":  ["alice", "bob"],
            "age":   [31, 42],
            "email": ["alice@example.com", None],
        })
        self.assertTrue(validate_frame(df, self.schema))

    def test_errors_are_prefixed_with_row_position(self):
        df = pd.DataFrame({
            "name":  ["alice", "x", None],
            "age":   [31, 42, 7],
            "email": [None, "not-an-email", "carol@example.com"],
        })
        with self.assertRaises(ValidationErrors) as ctx:
            validate_frame(df, self.schema)
        errs = ctx.exception.errors
        self.assertEqual(paths(errs), ["1.name", "1.email", "2.name"])
        self.assertEqual(keys(errs), ["len", "isEmail", "required"])

    def test_integer_column_with_gaps_stays_integer(self):
        df = pd.DataFrame({"name": ["alice", "bob"], "age": [31, None]})
        self.assertEqual(frame_records(df), [{"name": "alice", "age": 31}, {"name": "bob", "age": None}])
        self.assertIsInstance(frame_records(df)[0]["age"], int)
        self.assertTrue(validate_frame(df, {
            "name": {"type": "string"},
            "age":  {"type": "integer", "allowNull": True},
        }))

    def test_check_frame_returns_list(self):
        df = pd.DataFrame({"name": ["alice"]})
        self.assertEqual(check_frame(df, self.schema), [])

    def test_rejects_non_frames(self):
        with self.assertRaises(SchemaError):
            check_frame([{"name": "alice"}], self.schema)


if __name__ == "__main__":
    unittest.main()
