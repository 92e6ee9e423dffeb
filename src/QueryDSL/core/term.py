"""Term-equality queries.

`BaseTermQuery` holds a field name and one canonical `TermValue`. Text values
are normalized to UTF-8 bytes when the query is built, so a query typed in by a
caller and the same query read back from a stream or parsed from structured
input are equal and hash the same.

Identity is field name plus canonical value. Subclasses may carry more state
but cannot change how queries compare: overriding the equality hooks is
rejected when the subclass is defined.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, TypeVar

from QueryDSL.core.query import DEFAULT_BOOST, AbstractQuery, register_query
from QueryDSL.core.values import TermValue
from QueryDSL.transport.stream import StreamInput, StreamOutput

T = TypeVar("T", bound="BaseTermQuery")

_SEALED = ("__eq__", "__hash__", "do_equals", "do_hash")


class BaseTermQuery(AbstractQuery):
    """Exact-match condition on one field.

    Args:
        field_name: Name of the field to match against.
        value: Value to match. ``str``/``bytes``, ``bool``, ``int``, ``float``
            or a `TermValue` to pin the kind (e.g. ``TermValue.int64(5)``).
        boost: Query boost.
        query_name: Optional query name.

    Raises:
        ValueError: If ``field_name`` is empty or ``None``, or ``value`` is
            ``None``.
        TypeError: If the field name is not a string or the value type is not
            supported.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        overridden = [name for name in _SEALED if name in cls.__dict__]
        if overridden:
            raise TypeError(f"{cls.__name__} may not override {', '.join(overridden)}")

    def __init__(
        self,
        field_name: str,
        value: Any,
        *,
        boost: float = DEFAULT_BOOST,
        query_name: str | None = None,
    ) -> None:
        if not field_name:
            raise ValueError("field name is null or empty")
        if not isinstance(field_name, str):
            raise TypeError(f"field name must be a string, got {type(field_name).__name__}")
        if value is None:
            raise ValueError("value cannot be null")
        super().__init__(boost=boost, query_name=query_name)
        self._field_name = field_name
        self._value = TermValue.of(value)

    @property
    def field_name(self) -> str:
        return self._field_name

    @property
    def value(self) -> Any:
        """The value as the caller sees it; text is returned as ``str``."""
        return self._value.logical()

    @property
    def term_value(self) -> TermValue:
        """The canonical value, including its kind."""
        return self._value

    @classmethod
    @abstractmethod
    def create_builder(cls: type[T], field_name: str, value: Any) -> T:
        """Build a query of the concrete type from decoded fields."""

    def do_to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"value": self._value.logical()}
        self.print_boost_and_query_name(body)
        return {self.get_name(): {self._field_name: body}}

    def do_write_to(self, out: StreamOutput) -> None:
        out.write_string(self._field_name)
        out.write_generic_value(self._value)

    @classmethod
    def do_read_from(cls: type[T], inp: StreamInput) -> T:
        return cls.create_builder(inp.read_string(), inp.read_generic_value())

    def do_equals(self, other: BaseTermQuery) -> bool:
        return self._field_name == other._field_name and self._value == other._value

    def do_hash(self) -> int:
        return hash((self._field_name, self._value))


@register_query
class TermQuery(BaseTermQuery):
    """Documents whose field contains exactly the given term."""

    NAME = "term"

    @classmethod
    def create_builder(cls, field_name: str, value: Any) -> TermQuery:
        return cls(field_name, value)


@register_query
class SpanTermQuery(BaseTermQuery):
    """Span query matching spans that contain the given term."""

    NAME = "span_term"

    @classmethod
    def create_builder(cls, field_name: str, value: Any) -> SpanTermQuery:
        return cls(field_name, value)
