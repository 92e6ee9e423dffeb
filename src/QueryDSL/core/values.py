"""Canonical term values.

A term query carries exactly one primitive value. Python erases most of the
distinctions the wire format cares about (``int`` has no width, ``float`` has
no single precision), so values are held as an explicit tagged union:
`TermValue` pairs a `ValueKind` with a payload.

Text is the one kind that is not stored natively. It is kept as UTF-8 bytes so
that a value typed in by a caller and a value decoded from a stream always
carry the same internal representation.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


class ValueKind(Enum):
    """Supported term value kinds."""

    TEXT = "text"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True, eq=False)
class TermValue:
    """One canonicalized term value.

    Attributes:
        kind: Value kind tag.
        payload: Stored value. ``bytes`` for TEXT, ``int`` for INT/LONG,
            ``float`` for FLOAT/DOUBLE and ``bool`` for BOOLEAN.

    Equality compares kinds first, so ``INT 1``, ``LONG 1`` and ``BOOLEAN True``
    are three different values. Floats compare by bit pattern: ``0.0`` and
    ``-0.0`` differ, and ``nan`` equals itself.
    """

    kind: ValueKind
    payload: Any

    def __post_init__(self) -> None:
        # Every construction path, including the plain constructor, ends up
        # with the canonical payload for its kind.
        if not isinstance(self.kind, ValueKind):
            raise TypeError(f"kind must be a ValueKind, got {type(self.kind).__name__}")
        if self.payload is None:
            raise ValueError("value cannot be null")
        object.__setattr__(self, "payload", _canonical_payload(self.kind, self.payload))

    @classmethod
    def of(cls, value: Any) -> TermValue:
        """Infer a term value from a native Python value.

        Args:
            value: ``str``, ``bytes``, ``bool``, ``int``, ``float`` or an
                existing `TermValue`.

        Returns:
            Canonical term value.

        Raises:
            ValueError: If the value is ``None``, an integer wider than 64 bits
                or bytes that are not valid UTF-8.
            TypeError: If the value type is not supported.
        """
        if value is None:
            raise ValueError("value cannot be null")
        if isinstance(value, TermValue):
            return value
        if isinstance(value, str):
            return cls.text(value)
        if isinstance(value, (bytes, bytearray)):
            return cls.text(value)
        # bool is an int subclass; check it first
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            if INT32_MIN <= value <= INT32_MAX:
                return cls.int32(value)
            return cls.int64(value)
        if isinstance(value, float):
            return cls.float64(value)
        raise TypeError(f"unsupported term value type: {type(value).__name__}")

    @classmethod
    def text(cls, value: str | bytes | bytearray) -> TermValue:
        """Build a TEXT value, stored as UTF-8 bytes."""
        return cls(ValueKind.TEXT, value)

    @classmethod
    def int32(cls, value: int) -> TermValue:
        """Build an INT value (signed 32-bit)."""
        return cls(ValueKind.INT, value)

    @classmethod
    def int64(cls, value: int) -> TermValue:
        """Build a LONG value (signed 64-bit)."""
        return cls(ValueKind.LONG, value)

    @classmethod
    def float32(cls, value: float) -> TermValue:
        """Build a FLOAT value, rounded to single precision.

        Raises:
            ValueError: If the value overflows single precision.
        """
        return cls(ValueKind.FLOAT, value)

    @classmethod
    def float64(cls, value: float) -> TermValue:
        """Build a DOUBLE value."""
        return cls(ValueKind.DOUBLE, value)

    @classmethod
    def boolean(cls, value: bool) -> TermValue:
        """Build a BOOLEAN value."""
        return cls(ValueKind.BOOLEAN, value)

    def logical(self) -> Any:
        """Return the external value: decoded text for TEXT, the payload otherwise."""
        if self.kind is ValueKind.TEXT:
            return self.payload.decode("utf-8")
        return self.payload

    def _key(self) -> tuple[ValueKind, Any]:
        if self.kind is ValueKind.FLOAT:
            return self.kind, struct.pack(">f", self.payload)
        if self.kind is ValueKind.DOUBLE:
            return self.kind, struct.pack(">d", self.payload)
        return self.kind, self.payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermValue):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"TermValue({self.kind.value}, {self.logical()!r})"


def _canonical_payload(kind: ValueKind, value: Any) -> Any:
    """Validate ``value`` for ``kind`` and return its stored form.

    Raises:
        TypeError: If the payload type does not match the kind.
        ValueError: If the payload is out of range for the kind or is not
            valid UTF-8.
    """
    if kind is ValueKind.TEXT:
        return _as_utf8(value)
    if kind is ValueKind.INT:
        _check_int(value, INT32_MIN, INT32_MAX, "int32")
        return int(value)
    if kind is ValueKind.LONG:
        _check_int(value, INT64_MIN, INT64_MAX, "int64")
        return int(value)
    if kind is ValueKind.FLOAT:
        number = _as_float(value, "float32")
        try:
            return struct.unpack(">f", struct.pack(">f", number))[0]
        except OverflowError as e:
            raise ValueError(f"float32 value out of range: {value!r}") from e
    if kind is ValueKind.DOUBLE:
        return _as_float(value, "float64")
    if not isinstance(value, bool):
        raise TypeError(f"boolean value must be bool, got {type(value).__name__}")
    return value


def _as_utf8(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
        try:
            raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"text value is not valid UTF-8: {e}") from e
        return raw
    raise TypeError(f"text value must be str or bytes, got {type(value).__name__}")


def _check_int(value: Any, low: int, high: int, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} value must be an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{kind} value out of range: {value}")


def _as_float(value: Any, kind: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{kind} value must be a number, got {type(value).__name__}")
    number = float(value)
    if math.isnan(number):
        # single canonical NaN so bit-pattern equality is stable
        return math.nan
    return number
