"""defhint index command - show the definitions of an indexed module."""

import json
from pathlib import Path

import click
from rich.console import Console

from defhint.cli.utils import apply_logging
from defhint.config.loader import load_config
from defhint.config.models import DefhintConfig
from defhint.core.errors import ConfigError, IndexBuildError
from defhint.index.models import Definition, Index, index_to_dict
from defhint.index.store import IndexStore
from defhint.query.hover import format_signature
from defhint.session import load_library


def _resolve_source(path: Path) -> tuple[DefhintConfig, Path]:
    """Return (config, source file) for a module path or a directory.

    A module is indexed as given, with the config of the library root above
    it, or of its own directory when it sits outside any library.

    Raises:
        ConfigError: If a config is malformed.
        IndexBuildError: If PATH is a directory with no library above it.
    """
    try:
        location, config = load_library(path)
    except IndexBuildError:
        if path.is_dir():
            raise
        return load_config(path.parent), path
    return config, path if path.is_file() else location.source_file


def _print_definition(console: Console, name: str, definition: Definition, indent: str) -> None:
    if definition.is_degenerate:
        console.print(f"{indent}[dim]{name}[/dim] [yellow](unparsed header)[/yellow]")
        return
    console.print(f"{indent}[cyan]{format_signature(definition)}[/cyan]", highlight=False)
    for child_name, child in (definition.children or {}).items():
        _print_definition(console, child_name, child, indent + "    ")


def _print_index(console: Console, source: Path, index: Index) -> None:
    if not index:
        console.print(f"[yellow]No definitions[/yellow] in {source}")
        return
    console.print(f"[bold]{source}[/bold]: {len(index)} definitions\n")
    for name, definition in index.items():
        _print_definition(console, name, definition, "  ")


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def index_command(path: Path, as_json: bool) -> None:
    """Index a module and list its definitions.

    PATH is either the module to index or a directory below the library
    root (default: current directory).
    """
    try:
        config, source = _resolve_source(path.resolve())
        apply_logging(config)
        store = IndexStore(
            source, dialect=config.dialect, blocked_params=config.hints.blocked_params
        )
        store.rebuild(strict=True)
    except (ConfigError, IndexBuildError) as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps({"source": str(source), "index": index_to_dict(store.index)}))
    else:
        _print_index(Console(), source, store.index)
