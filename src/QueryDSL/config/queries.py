"""Query domain configuration.

Queries are written in the same structured form that ``to_dict`` produces, so a
rendered query can be pasted back into the config unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QueryDSL.config.common import expect_list
from QueryDSL.core.parser import parse_query
from QueryDSL.core.query import AbstractQuery


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store parsed queries in configured order."""

    queries: tuple[AbstractQuery, ...] = ()


def load_queries(raw: Mapping[str, Any]) -> QueryConfig:
    """Load query domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed query configuration. A missing ``queries`` key yields none.

    Raises:
        TypeError: If query shape/types are invalid.
        ValueError: If a query is structurally invalid.
    """
    queries_obj = raw.get("queries")
    if queries_obj is None:
        return QueryConfig()
    items = expect_list(queries_obj, "queries")
    return QueryConfig(queries=tuple(parse_query(item, f"queries[{idx}]") for idx, item in enumerate(items)))


def check_queries(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If the same query appears twice.
    """
    seen: set[AbstractQuery] = set()
    for idx, query in enumerate(config.queries):
        if query in seen:
            raise ValueError(f"queries[{idx}] duplicates an earlier query: {query.to_json()}")
        seen.add(query)
