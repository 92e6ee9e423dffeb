"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the command runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from QueryDSL.cli.runner import CommandRunner
from QueryDSL.config import load_config, parse_config_dict

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@click.group(help="QueryDSL: render, encode and decode term queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="QUERYDSL_CONFIG",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before resolving the config.
    A missing default config file means built-in defaults; a missing explicit
    one is an error.
    """
    load_dotenv()

    if config_path == DEFAULT_CONFIG_PATH and not config_path.exists():
        ctx.obj = parse_config_dict({})
        return
    try:
        ctx.obj = load_config(config_path)
    except (OSError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e


@cli.command("render")
@click.pass_context
def render_cmd(ctx: click.Context) -> None:
    """Print configured queries in structured (JSON) form."""
    CommandRunner(ctx.obj).run_emit(action=ctx.command.name, formats=("json",))


@cli.command("encode")
@click.pass_context
def encode_cmd(ctx: click.Context) -> None:
    """Print configured queries as hex-encoded binary streams."""
    CommandRunner(ctx.obj).run_emit(action=ctx.command.name, formats=("binary",))


@cli.command("emit")
@click.pass_context
def emit_cmd(ctx: click.Context) -> None:
    """Print configured queries in every format listed in output.formats."""
    CommandRunner(ctx.obj).run_emit(action=ctx.command.name)


@cli.command("decode")
@click.argument("payloads", nargs=-1, required=True)
@click.pass_context
def decode_cmd(ctx: click.Context, payloads: tuple[str, ...]) -> None:
    """Decode hex-encoded query streams and print them as JSON."""
    CommandRunner(ctx.obj).run_decode(action=ctx.command.name, payloads=payloads)
