"""Base classes for output writers.

Provides abstraction for emitting queries in one or more formats.
Separates command control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from QueryDSL.core.query import AbstractQuery


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query(self, query: AbstractQuery) -> None:
        """Write a single query.

        Args:
            query: The query to emit.
        """

    def finalize(self, action: str) -> None:
        """Finalize output after the last query.

        Args:
            action: The CLI command name (e.g., 'render').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query(self, query: AbstractQuery) -> None:
        """Send the query to all writers."""
        for writer in self.writers:
            writer.write_query(query)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
