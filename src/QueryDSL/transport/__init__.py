"""Binary stream transport for queries."""

from __future__ import annotations

from QueryDSL.transport.stream import StreamInput, StreamOutput

__all__ = ["StreamInput", "StreamOutput"]
