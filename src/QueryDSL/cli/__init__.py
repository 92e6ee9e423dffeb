"""CLI package for QueryDSL command orchestration.

Split into the click interface (`ui`), the runner handling logging and
errors (`runner`) and the command logic (`commands`).
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from QueryDSL.cli.runner import CommandRunner
from QueryDSL.cli.ui import cli


def main() -> None:
    """Run QueryDSL CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
