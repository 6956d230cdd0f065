"""clyro CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from clyro import __version__
from clyro.cli import console
from clyro.config import Settings
from clyro.errors import ConfigError


@click.group(invoke_without_command=True)
@click.version_option(__version__, "-v", "--version", prog_name="clyro")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """clyro - initialize and manage UI components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = Settings.from_env()
    except ConfigError as exc:
        console.error(str(exc))
        sys.exit(1)
    if ctx.invoked_subcommand is None:
        console.banner(__version__)
        click.echo(ctx.get_help())


# Import and register subcommands
from clyro.cli.init import init  # noqa: E402
from clyro.cli.add import add  # noqa: E402
from clyro.cli.theme import theme  # noqa: E402

cli.add_command(init)
cli.add_command(add)
cli.add_command(theme)
