"""Tests for canonical term values."""

import math
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryDSL.core.values import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, TermValue, ValueKind


class TestInference(unittest.TestCase):
    def test_str_is_stored_as_utf8_bytes(self) -> None:
        value = TermValue.of("héllo")
        self.assertIs(value.kind, ValueKind.TEXT)
        self.assertEqual(value.payload, "héllo".encode("utf-8"))
        self.assertEqual(value.logical(), "héllo")

    def test_bytes_and_str_are_the_same_value(self) -> None:
        self.assertEqual(TermValue.of("abc"), TermValue.of(b"abc"))
        self.assertEqual(hash(TermValue.of("abc")), hash(TermValue.of(bytearray(b"abc"))))

    def test_empty_text(self) -> None:
        value = TermValue.of("")
        self.assertEqual(value.payload, b"")
        self.assertEqual(value.logical(), "")

    def test_bool_is_not_inferred_as_int(self) -> None:
        self.assertIs(TermValue.of(True).kind, ValueKind.BOOLEAN)
        self.assertIs(TermValue.of(False).kind, ValueKind.BOOLEAN)

    def test_int_width_inference(self) -> None:
        self.assertIs(TermValue.of(0).kind, ValueKind.INT)
        self.assertIs(TermValue.of(INT32_MAX).kind, ValueKind.INT)
        self.assertIs(TermValue.of(INT32_MIN).kind, ValueKind.INT)
        self.assertIs(TermValue.of(INT32_MAX + 1).kind, ValueKind.LONG)
        self.assertIs(TermValue.of(INT32_MIN - 1).kind, ValueKind.LONG)

    def test_int_wider_than_64_bits_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TermValue.of(INT64_MAX + 1)
        with self.assertRaises(ValueError):
            TermValue.of(INT64_MIN - 1)

    def test_float_is_double(self) -> None:
        self.assertIs(TermValue.of(1.5).kind, ValueKind.DOUBLE)

    def test_none_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "value cannot be null"):
            TermValue.of(None)

    def test_unsupported_type_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            TermValue.of(["a"])
        with self.assertRaises(TypeError):
            TermValue.of({"a": 1})

    def test_invalid_utf8_bytes_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TermValue.of(b"\xff\xfe")

    def test_existing_value_is_kept(self) -> None:
        value = TermValue.int64(7)
        self.assertIs(TermValue.of(value), value)


class TestExplicitKinds(unittest.TestCase):
    def test_int32_range(self) -> None:
        with self.assertRaises(ValueError):
            TermValue.int32(INT32_MAX + 1)
        self.assertEqual(TermValue.int32(-5).payload, -5)

    def test_int64_accepts_small_values(self) -> None:
        value = TermValue.int64(5)
        self.assertIs(value.kind, ValueKind.LONG)

    def test_int_rejects_bool(self) -> None:
        with self.assertRaises(TypeError):
            TermValue.int32(True)

    def test_float32_rounds_to_single_precision(self) -> None:
        value = TermValue.float32(0.1)
        self.assertIs(value.kind, ValueKind.FLOAT)
        self.assertNotEqual(value.payload, 0.1)
        self.assertAlmostEqual(value.payload, 0.1, places=6)

    def test_float32_overflow_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TermValue.float32(1e300)

    def test_boolean_requires_bool(self) -> None:
        with self.assertRaises(TypeError):
            TermValue.boolean(1)


class TestDirectConstruction(unittest.TestCase):
    def test_text_str_payload_is_canonicalized(self) -> None:
        value = TermValue(ValueKind.TEXT, "abc")
        self.assertEqual(value.payload, b"abc")
        self.assertEqual(value, TermValue.of("abc"))
        self.assertEqual(hash(value), hash(TermValue.of("abc")))
        self.assertEqual(value.logical(), "abc")

    def test_text_invalid_payload(self) -> None:
        with self.assertRaises(ValueError):
            TermValue(ValueKind.TEXT, b"\xff")
        with self.assertRaises(TypeError):
            TermValue(ValueKind.TEXT, 3)

    def test_int_range_is_checked(self) -> None:
        with self.assertRaisesRegex(ValueError, "int32 value out of range"):
            TermValue(ValueKind.INT, 2**40)
        with self.assertRaisesRegex(ValueError, "int64 value out of range"):
            TermValue(ValueKind.LONG, 2**64)
        self.assertEqual(TermValue(ValueKind.LONG, 2**40), TermValue.of(2**40))

    def test_float_payloads(self) -> None:
        self.assertEqual(TermValue(ValueKind.FLOAT, 0.1), TermValue.float32(0.1))
        self.assertNotEqual(TermValue(ValueKind.FLOAT, 0.1).payload, 0.1)
        self.assertEqual(TermValue(ValueKind.DOUBLE, 2), TermValue.of(2.0))
        self.assertIsInstance(TermValue(ValueKind.DOUBLE, 2).payload, float)
        self.assertEqual(TermValue(ValueKind.DOUBLE, float("nan")), TermValue.of(math.nan))

    def test_boolean_payload(self) -> None:
        with self.assertRaises(TypeError):
            TermValue(ValueKind.BOOLEAN, 1)

    def test_kind_and_null(self) -> None:
        with self.assertRaises(TypeError):
            TermValue("text", b"abc")
        with self.assertRaisesRegex(ValueError, "value cannot be null"):
            TermValue(ValueKind.INT, None)


class TestEquality(unittest.TestCase):
    def test_kinds_are_never_equal_across(self) -> None:
        self.assertNotEqual(TermValue.int32(5), TermValue.int64(5))
        self.assertNotEqual(TermValue.of(1), TermValue.of(True))
        self.assertNotEqual(TermValue.of(1), TermValue.of(1.0))
        self.assertNotEqual(TermValue.float32(0.5), TermValue.float64(0.5))

    def test_negative_zero_differs_from_zero(self) -> None:
        self.assertNotEqual(TermValue.of(0.0), TermValue.of(-0.0))
        self.assertEqual(TermValue.of(-0.0), TermValue.of(-0.0))

    def test_nan_equals_itself(self) -> None:
        self.assertEqual(TermValue.of(math.nan), TermValue.of(float("nan")))
        self.assertEqual(hash(TermValue.of(math.nan)), hash(TermValue.of(float("nan"))))

    def test_usable_as_set_members(self) -> None:
        values = {TermValue.of("a"), TermValue.of(b"a"), TermValue.of(1), TermValue.int64(1)}
        self.assertEqual(len(values), 3)

    def test_not_equal_to_native_value(self) -> None:
        self.assertNotEqual(TermValue.of("a"), "a")


if __name__ == "__main__":
    unittest.main()
