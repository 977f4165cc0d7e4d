"""pytestmap CLI - ptm command."""

from pathlib import Path

import click

from pytestmap.cli.discover import discover_command
from pytestmap.cli.match import match_command
from pytestmap.config.loader import load_config
from pytestmap.core.errors import ConfigError
from pytestmap.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="ptm")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """pytestmap - normalize pytest discovery output for test explorers."""
    ctx.ensure_object(dict)
    try:
        config = load_config(Path.cwd())
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["config"] = config


cli.add_command(discover_command, name="discover")
cli.add_command(match_command, name="match")


if __name__ == "__main__":
    cli()
