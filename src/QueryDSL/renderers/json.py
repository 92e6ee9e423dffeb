"""JSON output renderers.

Renders queries in their structured form and echoes them to stdout.
"""

from __future__ import annotations

import click

from QueryDSL.core.query import AbstractQuery
from QueryDSL.renderers.base import OutputWriter
from QueryDSL.utils.log import log


class JsonOutputWriter(OutputWriter):
    """Echo each query as one JSON document."""

    def __init__(self, indent: int = 2) -> None:
        """Initialize JSON writer.

        Args:
            indent: JSON indent; 0 prints each query on one line.
        """
        self.indent = indent or None
        self.count = 0

    def write_query(self, query: AbstractQuery) -> None:
        click.echo(query.to_json(indent=self.indent))
        self.count += 1

    def finalize(self, action: str) -> None:
        log.debug("%s: wrote %d JSON queries", action, self.count)
