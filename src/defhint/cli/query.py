"""defhint hover / complete commands - run editor queries from the shell."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markdown import Markdown

from defhint.cli.utils import read_line, require_session, to_offset


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.argument("column", type=click.IntRange(min=1))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def hover_command(file: Path, line: int, column: int, as_json: bool) -> None:
    """Show the definition under the cursor.

    LINE and COLUMN are 1-based positions in FILE.
    """
    text = read_line(file, line)
    session = require_session(file)
    result = session.hover(text, to_offset(text, column))

    if as_json:
        click.echo(json.dumps(result.to_dict() if result else None))
    elif result is None:
        click.echo("No definition found.")
    else:
        Console().print(Markdown(result.to_markdown()))


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.argument("column", type=click.IntRange(min=1))
@click.option(
    "--trigger",
    type=click.Choice([".", "(", ","]),
    default=None,
    help="Character that triggered completion",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def complete_command(
    file: Path, line: int, column: int, trigger: str | None, as_json: bool
) -> None:
    """List completions for the call or namespace at the cursor.

    LINE and COLUMN are 1-based positions in FILE; the cursor sits before
    COLUMN, so COLUMN may be one past the end of the line.
    """
    text = read_line(file, line)
    session = require_session(file)
    items = session.complete(text, to_offset(text, column), trigger)

    if as_json:
        click.echo(json.dumps(items))
    else:
        for item in items:
            click.echo(item)
