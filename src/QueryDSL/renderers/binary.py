"""Binary stream output renderers.

Each query is written with its type name in front (see
``write_named_query``) and echoed as lowercase hex, one query per line.
"""

from __future__ import annotations

import click

from QueryDSL.core.query import AbstractQuery, decode_query, encode_query
from QueryDSL.renderers.base import OutputWriter
from QueryDSL.utils.log import log


def render_hex(query: AbstractQuery) -> str:
    return encode_query(query).hex()


def load_hex(text: str) -> AbstractQuery:
    """Decode one query from hex text.

    Whitespace is ignored so wrapped output can be pasted back.

    Raises:
        ValueError: If the text is not hex or the stream is malformed.
        EOFError: If the stream is truncated.
    """
    return decode_query(bytes.fromhex("".join(text.split())))


class BinaryOutputWriter(OutputWriter):
    """Echo each query as a hex-encoded stream."""

    def __init__(self) -> None:
        self.total_bytes = 0

    def write_query(self, query: AbstractQuery) -> None:
        encoded = encode_query(query)
        self.total_bytes += len(encoded)
        click.echo(encoded.hex())

    def finalize(self, action: str) -> None:
        log.debug("%s: wrote %d stream bytes", action, self.total_bytes)
