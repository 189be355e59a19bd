"""CLI utilities."""

from pathlib import Path

import click

from defhint.config.models import DefhintConfig
from defhint.core.errors import ConfigError, IndexBuildError
from defhint.core.logging import configure_logging
from defhint.session import HintSession, hints_disabled, load_library


def read_line(path: Path, line: int) -> str:
    """Return 1-based ``line`` of ``path`` without its line ending.

    Raises:
        click.ClickException: If the file cannot be read or the line does not exist
    """
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e

    if not 1 <= line <= len(lines):
        raise click.ClickException(f"Line {line} out of range: {path} has {len(lines)} lines")
    return lines[line - 1]


def to_offset(text: str, column: int) -> int:
    """Convert a 1-based column to a 0-based cursor offset within ``text``."""
    if not 1 <= column <= len(text) + 1:
        raise click.ClickException(f"Column {column} out of range for a {len(text)}-character line")
    return column - 1


def apply_logging(config: DefhintConfig) -> None:
    """Reconfigure logging from the loaded config. ``-v`` forces DEBUG everywhere."""
    logging_config = config.logging
    obj = click.get_current_context().find_object(dict) or {}
    if obj.get("verbose"):
        logging_config = logging_config.model_copy(
            update={
                "level": "DEBUG",
                "outputs": [o.model_copy(update={"level": None}) for o in logging_config.outputs],
            }
        )
    configure_logging(config=logging_config)


def require_session(path: Path) -> HintSession:
    """Open a hint session for ``path`` or fail with a readable message.

    Raises:
        click.ClickException: If the config is invalid, no library is found,
            or hints are disabled for the file
    """
    try:
        location, config = load_library(path)
    except (ConfigError, IndexBuildError) as e:
        raise click.ClickException(str(e)) from e

    apply_logging(config)
    if hints_disabled(path, location, config):
        raise click.ClickException(
            f"Hints are disabled for files in the library root {location.root} "
            "(source.disable_from_root)"
        )
    return HintSession(config, location.source_file)
