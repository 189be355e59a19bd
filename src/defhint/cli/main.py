"""defhint CLI - defhint command."""

import click

from defhint import __version__
from defhint.cli.index import index_command
from defhint.cli.query import complete_command, hover_command
from defhint.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="defhint")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """defhint - signature hints and completions for an indented def/class dialect."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(index_command, name="index")
cli.add_command(hover_command, name="hover")
cli.add_command(complete_command, name="complete")


if __name__ == "__main__":
    cli()
