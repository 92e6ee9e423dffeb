"""Tests for structured query parsing."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryDSL.core.parser import parse_query, parse_query_json
from QueryDSL.core.term import SpanTermQuery, TermQuery
from QueryDSL.core.values import ValueKind


class TestParseTerm(unittest.TestCase):
    def test_short_form(self) -> None:
        query = parse_query({"term": {"user.id": "abc"}})
        self.assertEqual(query, TermQuery("user.id", "abc"))

    def test_long_form(self) -> None:
        query = parse_query({"span_term": {"title": {"value": "x", "boost": 2, "_name": "q1"}}})
        self.assertIsInstance(query, SpanTermQuery)
        self.assertEqual(query.field_name, "title")
        self.assertEqual(query.value, "x")
        self.assertEqual(query.boost, 2.0)
        self.assertEqual(query.query_name, "q1")

    def test_parsed_text_equals_literal(self) -> None:
        literal = TermQuery("user.id", "abc")
        parsed = parse_query_json('{"term": {"user.id": {"value": "abc"}}}')
        self.assertEqual(parsed, literal)
        self.assertEqual(hash(parsed), hash(literal))

    def test_structured_round_trip(self) -> None:
        queries = [
            TermQuery("user.id", "abc"),
            TermQuery("n", -3),
            TermQuery("big", 2**40),
            TermQuery("r", 0.25, boost=1.5),
            SpanTermQuery("flag", True, query_name="f"),
        ]
        for query in queries:
            with self.subTest(query=query):
                parsed = parse_query(json.loads(query.to_json()))
                self.assertEqual(parsed, query)
                self.assertEqual(parsed.to_dict(), query.to_dict())

    def test_json_numbers_infer_kinds(self) -> None:
        self.assertIs(parse_query({"term": {"n": 5}}).term_value.kind, ValueKind.INT)
        self.assertIs(parse_query({"term": {"n": 5000000000}}).term_value.kind, ValueKind.LONG)
        self.assertIs(parse_query({"term": {"n": 5.0}}).term_value.kind, ValueKind.DOUBLE)

    def test_missing_value(self) -> None:
        with self.assertRaisesRegex(ValueError, r"query\.term\.f\.value"):
            parse_query({"term": {"f": {"boost": 2.0}}})

    def test_null_value(self) -> None:
        with self.assertRaisesRegex(ValueError, "value cannot be null"):
            parse_query({"term": {"f": None}})

    def test_empty_field_name(self) -> None:
        with self.assertRaisesRegex(ValueError, "field name is null or empty"):
            parse_query({"term": {"": "v"}})

    def test_unknown_keys(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown keys"):
            parse_query({"term": {"f": {"value": "v", "case_insensitive": True}}})

    def test_exactly_one_field(self) -> None:
        with self.assertRaisesRegex(ValueError, "exactly one field"):
            parse_query({"term": {"f": "v", "g": "w"}})

    def test_exactly_one_query_type(self) -> None:
        with self.assertRaisesRegex(ValueError, "exactly one query type"):
            parse_query({"term": {"f": "v"}, "span_term": {"f": "v"}})

    def test_unknown_query_type(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown query type: match"):
            parse_query({"match": {"f": "v"}})

    def test_bad_types(self) -> None:
        with self.assertRaises(TypeError):
            parse_query(["term"])
        with self.assertRaises(TypeError):
            parse_query({"term": "f"})
        with self.assertRaises(TypeError):
            parse_query({"term": {"f": {"value": "v", "boost": "high"}}})
        with self.assertRaises(TypeError):
            parse_query({"term": {"f": {"value": "v", "_name": 3}}})
        with self.assertRaises(TypeError):
            parse_query({"term": {"f": ["a", "b"]}})

    def test_error_key_path(self) -> None:
        with self.assertRaisesRegex(TypeError, r"queries\[2\]\.term must be an object"):
            parse_query({"term": 1}, "queries[2]")


if __name__ == "__main__":
    unittest.main()
