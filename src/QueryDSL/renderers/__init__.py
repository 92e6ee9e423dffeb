"""Output renderers for command results.

Provides abstraction and implementations for writing queries in their
structured (JSON) and binary stream (hex) forms, and a factory function to
instantiate writers based on configuration.
"""

from __future__ import annotations

from QueryDSL.config import AppConfig
from QueryDSL.renderers.base import MultiOutputWriter, OutputWriter
from QueryDSL.renderers.binary import BinaryOutputWriter, load_hex, render_hex
from QueryDSL.renderers.json import JsonOutputWriter


def create_output_writer(config: AppConfig, formats: tuple[str, ...] | None = None) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.
        formats: Formats overriding ``config.output.formats``.

    Returns:
        Appropriate OutputWriter instance for the selected formats.
    """
    selected = formats if formats is not None else config.output.formats
    writers: list[OutputWriter] = []
    for fmt in selected:
        if fmt == "json":
            writers.append(JsonOutputWriter(config.output.indent))
        elif fmt == "binary":
            writers.append(BinaryOutputWriter())
        else:
            raise ValueError(f"Unknown output format: {fmt}")

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "MultiOutputWriter",
    "JsonOutputWriter",
    "BinaryOutputWriter",
    "render_hex",
    "load_hex",
    "create_output_writer",
]
