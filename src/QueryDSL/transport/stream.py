"""Binary stream encoding.

`StreamOutput` and `StreamInput` wrap an in-memory byte buffer and provide the
primitives queries use to serialize themselves: fixed-width big-endian numbers,
variable-length ints, length-prefixed text and a generic tagged value.

Generic value layout: one signed tag byte followed by a kind-specific payload.

==== ============ ================================
tag  kind         payload
==== ============ ================================
-1   null         none
0    string       vint byte length + UTF-8
1    int32        4 bytes
2    int64        8 bytes
3    float32      4 bytes (IEEE 754)
4    float64      8 bytes (IEEE 754)
5    boolean      1 byte, 0 or 1
21   byte string  vint length + raw bytes
==== ============ ================================
"""

from __future__ import annotations

import io
import struct
from typing import Any, Final

from QueryDSL.core.values import TermValue, ValueKind

TAG_NULL: Final[int] = -1
TAG_STRING: Final[int] = 0
TAG_INT: Final[int] = 1
TAG_LONG: Final[int] = 2
TAG_FLOAT: Final[int] = 3
TAG_DOUBLE: Final[int] = 4
TAG_BOOLEAN: Final[int] = 5
TAG_BYTES: Final[int] = 21

_KIND_TO_TAG: Final[dict[ValueKind, int]] = {
    ValueKind.TEXT: TAG_BYTES,
    ValueKind.INT: TAG_INT,
    ValueKind.LONG: TAG_LONG,
    ValueKind.FLOAT: TAG_FLOAT,
    ValueKind.DOUBLE: TAG_DOUBLE,
    ValueKind.BOOLEAN: TAG_BOOLEAN,
}

_MAX_VINT_BYTES: Final[int] = 5


class StreamOutput:
    """Append-only binary sink backed by ``io.BytesIO``."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return self._buffer.getvalue()

    def write_bytes(self, data: bytes) -> None:
        self._buffer.write(data)

    def write_byte(self, value: int) -> None:
        """Write one signed byte."""
        self._buffer.write(struct.pack(">b", value))

    def write_boolean(self, value: bool) -> None:
        self._buffer.write(b"\x01" if value else b"\x00")

    def write_int(self, value: int) -> None:
        self._buffer.write(struct.pack(">i", value))

    def write_long(self, value: int) -> None:
        self._buffer.write(struct.pack(">q", value))

    def write_float(self, value: float) -> None:
        self._buffer.write(struct.pack(">f", value))

    def write_double(self, value: float) -> None:
        self._buffer.write(struct.pack(">d", value))

    def write_vint(self, value: int) -> None:
        """Write a non-negative int using 7 bits per byte.

        Raises:
            ValueError: If value is negative or does not fit 32 bits.
        """
        if value < 0 or value > 0xFFFFFFFF:
            raise ValueError(f"vint out of range: {value}")
        out = bytearray()
        while value & ~0x7F:
            out.append((value & 0x7F) | 0x80)
            value >>= 7
        out.append(value)
        self._buffer.write(bytes(out))

    def write_byte_string(self, data: bytes) -> None:
        """Write a length-prefixed byte sequence."""
        self.write_vint(len(data))
        self.write_bytes(data)

    def write_string(self, value: str) -> None:
        """Write length-prefixed UTF-8 text."""
        self.write_byte_string(value.encode("utf-8"))

    def write_optional_string(self, value: str | None) -> None:
        if value is None:
            self.write_boolean(False)
            return
        self.write_boolean(True)
        self.write_string(value)

    def write_generic_value(self, value: Any) -> None:
        """Write a tagged value.

        Accepts ``None``, a `TermValue` (its kind selects the tag) or a native
        ``str``/``bytes``/``bool``/``int``/``float``, inferred the same way
        `TermValue.of` infers it.

        Raises:
            TypeError: If the value type cannot be encoded.
            ValueError: If an integer does not fit 64 bits.
        """
        if value is None:
            self.write_byte(TAG_NULL)
            return
        if isinstance(value, str):
            self.write_byte(TAG_STRING)
            self.write_string(value)
            return
        term_value = TermValue.of(value)
        tag = _KIND_TO_TAG[term_value.kind]
        self.write_byte(tag)
        payload = term_value.payload
        if tag == TAG_BYTES:
            self.write_byte_string(payload)
        elif tag == TAG_INT:
            self.write_int(payload)
        elif tag == TAG_LONG:
            self.write_long(payload)
        elif tag == TAG_FLOAT:
            self.write_float(payload)
        elif tag == TAG_DOUBLE:
            self.write_double(payload)
        else:
            self.write_boolean(payload)


class StreamInput:
    """Sequential reader over bytes produced by `StreamOutput`.

    Truncated input raises ``EOFError``; malformed content raises ``ValueError``.
    """

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)
        self._size = len(data)

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return self._size - self._buffer.tell()

    def read_bytes(self, length: int) -> bytes:
        data = self._buffer.read(length)
        if len(data) != length:
            raise EOFError(f"expected {length} bytes, got {len(data)}")
        return data

    def read_byte(self) -> int:
        return struct.unpack(">b", self.read_bytes(1))[0]

    def read_boolean(self) -> bool:
        raw = self.read_bytes(1)[0]
        if raw not in (0, 1):
            raise ValueError(f"unexpected boolean byte: {raw}")
        return raw == 1

    def read_int(self) -> int:
        return struct.unpack(">i", self.read_bytes(4))[0]

    def read_long(self) -> int:
        return struct.unpack(">q", self.read_bytes(8))[0]

    def read_float(self) -> float:
        return struct.unpack(">f", self.read_bytes(4))[0]

    def read_double(self) -> float:
        return struct.unpack(">d", self.read_bytes(8))[0]

    def read_vint(self) -> int:
        value = 0
        for shift in range(0, 7 * _MAX_VINT_BYTES, 7):
            b = self.read_bytes(1)[0]
            value |= (b & 0x7F) << shift
            if not b & 0x80:
                if value > 0xFFFFFFFF:
                    raise ValueError("vint overflows 32 bits")
                return value
        raise ValueError(f"vint longer than {_MAX_VINT_BYTES} bytes")

    def read_byte_string(self) -> bytes:
        return self.read_bytes(self.read_vint())

    def read_string(self) -> str:
        raw = self.read_byte_string()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"invalid UTF-8 in string: {e}") from e

    def read_optional_string(self) -> str | None:
        if self.read_boolean():
            return self.read_string()
        return None

    def read_generic_value(self) -> TermValue | None:
        """Read a tagged value.

        Returns:
            ``None`` for the null tag, otherwise a `TermValue` whose kind is
            the one the tag names. Strings come back as TEXT, same as bytes.

        Raises:
            ValueError: If the tag is unknown.
        """
        tag = self.read_byte()
        if tag == TAG_NULL:
            return None
        if tag == TAG_STRING:
            return TermValue.text(self.read_string())
        if tag == TAG_BYTES:
            return TermValue.text(self.read_byte_string())
        if tag == TAG_INT:
            return TermValue.int32(self.read_int())
        if tag == TAG_LONG:
            return TermValue.int64(self.read_long())
        if tag == TAG_FLOAT:
            return TermValue.float32(self.read_float())
        if tag == TAG_DOUBLE:
            return TermValue.float64(self.read_double())
        if tag == TAG_BOOLEAN:
            return TermValue.boolean(self.read_boolean())
        raise ValueError(f"unknown generic value tag: {tag}")
