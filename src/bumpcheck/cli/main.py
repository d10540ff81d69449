"""bumpcheck CLI."""

import click

from bumpcheck import __version__
from bumpcheck.cli.compare import compare_command
from bumpcheck.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="bumpcheck")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """bumpcheck - Detect semantic-versioning-relevant changes between two code snapshots."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(compare_command, name="compare")


if __name__ == "__main__":
    cli()
