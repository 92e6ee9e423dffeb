"""Command implementations for QueryDSL CLI.

Encapsulates command logic separately from CLI parameter handling and output
formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from QueryDSL.core.query import AbstractQuery
from QueryDSL.renderers import OutputWriter
from QueryDSL.renderers.binary import load_hex
from QueryDSL.utils.log import log


@dataclass(slots=True)
class EmitCommand:
    """Send every configured query to the output writer."""

    queries: Sequence[AbstractQuery]
    output_writer: OutputWriter

    def execute(self) -> None:
        if not self.queries:
            log.warning("No queries configured")
        for idx, query in enumerate(self.queries, start=1):
            log.debug("Emitting query %d/%d type=%s", idx, len(self.queries), query.get_name())
            self.output_writer.write_query(query)


@dataclass(slots=True)
class DecodeCommand:
    """Decode hex-encoded streams and send the queries to the output writer."""

    payloads: Sequence[str]
    output_writer: OutputWriter

    def execute(self) -> None:
        for idx, payload in enumerate(self.payloads, start=1):
            query = load_hex(payload)
            log.debug("Decoded payload %d/%d into %r", idx, len(self.payloads), query)
            self.output_writer.write_query(query)
