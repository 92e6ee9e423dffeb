"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Sequence

import click

from QueryDSL.cli.commands import DecodeCommand, EmitCommand
from QueryDSL.config import AppConfig
from QueryDSL.renderers import create_output_writer
from QueryDSL.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation, and error handling for
    CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_emit(self, action: str, formats: tuple[str, ...] | None = None) -> None:
        """Write all configured queries.

        Args:
            action: The CLI command name (e.g., 'render').
            formats: Output formats overriding the config.

        Raises:
            click.Abort: When rendering fails.
        """
        self._configure_logging(action)
        try:
            output_writer = create_output_writer(self.config, formats)
            EmitCommand(queries=self.config.queries.queries, output_writer=output_writer).execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e

    def run_decode(self, action: str, payloads: Sequence[str]) -> None:
        """Decode hex payloads and write them as structured output.

        Raises:
            click.Abort: When a payload cannot be decoded.
        """
        self._configure_logging(action)
        try:
            output_writer = create_output_writer(self.config, ("json",))
            DecodeCommand(payloads=payloads, output_writer=output_writer).execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
