"""Base query contract and named-query registry.

Every query type has a ``NAME`` (the key used in structured output and in the
named stream framing), a ``boost`` and an optional ``query_name``. Concrete
types fill in the ``do_*`` hooks; the base class owns the parts that are the
same for every query.
"""

from __future__ import annotations

import copy
import json
import struct
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

from QueryDSL.transport.stream import StreamInput, StreamOutput
from QueryDSL.utils.log import log

DEFAULT_BOOST = 1.0
BOOST_FIELD = "boost"
NAME_FIELD = "_name"

Q = TypeVar("Q", bound="AbstractQuery")


class AbstractQuery(ABC):
    """Base class for all query descriptors.

    Queries are immutable. ``with_boost`` and ``with_query_name`` return
    modified copies.
    """

    NAME: ClassVar[str]

    def __init__(self, *, boost: float = DEFAULT_BOOST, query_name: str | None = None) -> None:
        self._boost = _as_boost(boost)
        self._query_name = query_name

    @classmethod
    def get_name(cls) -> str:
        """Return the query type identifier."""
        return cls.NAME

    @property
    def boost(self) -> float:
        return self._boost

    @property
    def query_name(self) -> str | None:
        return self._query_name

    def with_boost(self: Q, boost: float) -> Q:
        clone = copy.copy(self)
        clone._boost = _as_boost(boost)
        return clone

    def with_query_name(self: Q, query_name: str | None) -> Q:
        clone = copy.copy(self)
        clone._query_name = query_name
        return clone

    # -- structured output -------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Render the query in its structured form."""
        return self.do_to_dict()

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def print_boost_and_query_name(self, body: dict[str, Any]) -> None:
        """Add the common ``boost``/``_name`` fields to a query body.

        ``boost`` is omitted at its default; ``_name`` is omitted when unset.
        """
        if self._boost != DEFAULT_BOOST:
            body[BOOST_FIELD] = self._boost
        if self._query_name is not None:
            body[NAME_FIELD] = self._query_name

    @abstractmethod
    def do_to_dict(self) -> dict[str, Any]:
        """Return ``{NAME: {...}}`` for this query."""

    # -- binary stream -----------------------------------------------------

    def write_to(self, out: StreamOutput) -> None:
        """Write the query body followed by boost and query name."""
        self.do_write_to(out)
        out.write_float(self._boost)
        out.write_optional_string(self._query_name)

    @classmethod
    def read_from(cls: type[Q], inp: StreamInput) -> Q:
        """Read a query of this type written by `write_to`."""
        query = cls.do_read_from(inp)
        query._boost = inp.read_float()
        query._query_name = inp.read_optional_string()
        return query

    @abstractmethod
    def do_write_to(self, out: StreamOutput) -> None:
        """Write the type-specific fields."""

    @classmethod
    @abstractmethod
    def do_read_from(cls: type[Q], inp: StreamInput) -> Q:
        """Read the type-specific fields and build the query."""

    # -- identity ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self.do_equals(other)

    def __hash__(self) -> int:
        return hash((self.get_name(), self.do_hash()))

    @abstractmethod
    def do_equals(self, other: Any) -> bool:
        """Compare type-specific state; ``other`` has the same concrete type."""

    @abstractmethod
    def do_hash(self) -> int:
        """Hash type-specific state consistently with `do_equals`."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()})"


def _as_boost(boost: float) -> float:
    # boost travels as float32; store what the stream will carry back
    return struct.unpack(">f", struct.pack(">f", float(boost)))[0]


_REGISTRY: dict[str, type[AbstractQuery]] = {}


def register_query(cls: type[Q]) -> type[Q]:
    """Class decorator registering a query type under its ``NAME``.

    Raises:
        ValueError: If another class already uses the same name.
    """
    name = cls.get_name()
    existing = _REGISTRY.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(f"query name already registered: {name}")
    _REGISTRY[name] = cls
    log.debug("Registered query type %s -> %s", name, cls.__name__)
    return cls


def lookup_query(name: str) -> type[AbstractQuery]:
    """Return the query class registered under ``name``.

    Raises:
        ValueError: If no query is registered under that name.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(f"unknown query type: {name}")
    return cls


def registered_query_names() -> tuple[str, ...]:
    return tuple(_REGISTRY.keys())


def write_named_query(out: StreamOutput, query: AbstractQuery) -> None:
    """Write the query type name, then the query itself."""
    out.write_string(query.get_name())
    query.write_to(out)


def read_named_query(inp: StreamInput) -> AbstractQuery:
    """Read a query written by `write_named_query`."""
    name = inp.read_string()
    log.debug("Decoding query type %s", name)
    return lookup_query(name).read_from(inp)


def encode_query(query: AbstractQuery) -> bytes:
    out = StreamOutput()
    write_named_query(out, query)
    return out.getvalue()


def decode_query(data: bytes) -> AbstractQuery:
    """Decode exactly one named query from ``data``.

    Raises:
        ValueError: If bytes remain after the query.
    """
    inp = StreamInput(data)
    query = read_named_query(inp)
    if inp.remaining():
        raise ValueError(f"{inp.remaining()} trailing bytes after query {query.get_name()}")
    return query
