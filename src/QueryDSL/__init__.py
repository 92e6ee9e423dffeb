"""QueryDSL: term-equality query descriptors.

Term queries ask "does field F contain exactly value V". Values are kept in a
canonical form so that queries compare, hash and serialize the same way no
matter how they were built.
"""

from __future__ import annotations

from QueryDSL.core.parser import parse_query, parse_query_json
from QueryDSL.core.query import (
    AbstractQuery,
    decode_query,
    encode_query,
    read_named_query,
    register_query,
    write_named_query,
)
from QueryDSL.core.term import BaseTermQuery, SpanTermQuery, TermQuery
from QueryDSL.core.values import TermValue, ValueKind
from QueryDSL.transport import StreamInput, StreamOutput

__all__ = [
    "AbstractQuery",
    "BaseTermQuery",
    "TermQuery",
    "SpanTermQuery",
    "TermValue",
    "ValueKind",
    "StreamInput",
    "StreamOutput",
    "register_query",
    "write_named_query",
    "read_named_query",
    "encode_query",
    "decode_query",
    "parse_query",
    "parse_query_json",
]
