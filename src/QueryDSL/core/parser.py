"""Structured query parsing.

Turns the structured form produced by ``AbstractQuery.to_dict`` back into query
objects. Term queries accept two shapes::

    {"term": {"user.id": "abc"}}
    {"term": {"user.id": {"value": "abc", "boost": 2.0, "_name": "q1"}}}

JSON carries no integer width or float precision: integers parse as INT when
they fit 32 bits and LONG otherwise, and floats parse as DOUBLE.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from QueryDSL.core.query import BOOST_FIELD, DEFAULT_BOOST, NAME_FIELD, AbstractQuery, lookup_query
from QueryDSL.core.term import BaseTermQuery

_TERM_KEYS = frozenset({"value", BOOST_FIELD, NAME_FIELD})


def parse_query(value: Any, config_key: str = "query") -> AbstractQuery:
    """Parse one structured query.

    Args:
        value: Mapping with exactly one key, the query type name.
        config_key: Key path used in error messages.

    Returns:
        Parsed query object.

    Raises:
        TypeError: If the shape or value types are invalid.
        ValueError: If the query type is unknown or required keys are missing.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")
    if len(value) != 1:
        raise ValueError(f"{config_key} must have exactly one query type, got {sorted(map(str, value))}")

    (name, body), = value.items()
    cls = lookup_query(name)
    if issubclass(cls, BaseTermQuery):
        return _parse_term_body(cls, body, f"{config_key}.{name}")
    raise ValueError(f"{config_key} has no structured parser for query type: {name}")


def parse_query_json(text: str) -> AbstractQuery:
    """Parse one query from JSON text."""
    return parse_query(json.loads(text))


def _parse_term_body(cls: type[BaseTermQuery], body: Any, config_key: str) -> BaseTermQuery:
    if not isinstance(body, Mapping):
        raise TypeError(f"{config_key} must be an object")
    if len(body) != 1:
        raise ValueError(f"{config_key} must name exactly one field, got {sorted(map(str, body))}")

    (field_name, spec), = body.items()
    if not isinstance(field_name, str):
        raise TypeError(f"{config_key} field name must be a string")
    field_key = f"{config_key}.{field_name}"

    if not isinstance(spec, Mapping):
        return cls(field_name, spec)

    unknown = {str(k) for k in spec} - _TERM_KEYS
    if unknown:
        raise ValueError(f"{field_key} has unknown keys: {sorted(unknown)}")
    if "value" not in spec:
        raise ValueError(f"Missing required query key: {field_key}.value")

    boost = spec.get(BOOST_FIELD, DEFAULT_BOOST)
    if isinstance(boost, bool) or not isinstance(boost, (int, float)):
        raise TypeError(f"{field_key}.{BOOST_FIELD} must be a number")
    query_name = spec.get(NAME_FIELD)
    if query_name is not None and not isinstance(query_name, str):
        raise TypeError(f"{field_key}.{NAME_FIELD} must be a string")

    return cls(field_name, spec["value"], boost=boost, query_name=query_name)
