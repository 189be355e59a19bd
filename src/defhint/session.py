"""Hover and completion over one indexed library.

A HintSession plays the part the editor integration needs: it owns the
configuration, the index store and the name mapper, and answers per-line
queries. Queries never modify the session; only ``rebuild()`` does.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from defhint.config.loader import load_config
from defhint.config.models import DefhintConfig
from defhint.core.errors import IndexBuildError
from defhint.index.models import Definition, Index
from defhint.index.store import IndexStore
from defhint.locate import LibraryLocation, LibraryLocator, is_root_file
from defhint.query.call_context import call_context
from defhint.query.completion import completion_items
from defhint.query.hover import HoverResult, hover_for
from defhint.query.names import NameMapper
from defhint.query.resolver import resolve
from defhint.query.tokens import context_token, split_path, word_range_at

log = structlog.get_logger(__name__)


class HintSession:
    """Index plus query entry points for one library module."""

    def __init__(self, config: DefhintConfig, source_path: Path) -> None:
        self.config = config
        self.store = IndexStore(
            source_path,
            dialect=config.dialect,
            blocked_params=config.hints.blocked_params,
        )
        self.mapper = NameMapper.from_config(config.hints)

    @property
    def index(self) -> Index:
        return self.store.index

    def rebuild(self) -> bool:
        """Re-read the library module. The previous index survives a failed read."""
        return self.store.rebuild()

    def definition_at(self, line: str, column: int) -> Definition | None:
        """Definition named by the identifier at ``column`` of ``line``."""
        span = word_range_at(line, column)
        if span is None:
            return None
        start, end = span
        return resolve(self.index, self.mapper, line[start:end], context_token(line[:start]))

    def hover(self, line: str, column: int) -> HoverResult | None:
        return hover_for(self.definition_at(line, column))

    def complete(self, line: str, column: int, trigger: str | None = None) -> list[str]:
        """Completion strings for the call or namespace enclosing ``column``.

        Args:
            line: Full text of the current line.
            column: 0-based cursor offset.
            trigger: Character that triggered completion, if any.
        """
        path = call_context(line[:column], triggered_by_comma=trigger == ",")
        context, primary = split_path(path)
        definition = resolve(self.index, self.mapper, primary, context)
        return completion_items(definition, self.config.hints)


def load_library(
    path: Path,
    *,
    locator: LibraryLocator | None = None,
    **overrides: Any,
) -> tuple[LibraryLocation, DefhintConfig]:
    """Locate the library above ``path`` and load the config of its root.

    The library folder is looked up with the config visible from ``path``
    itself (or its directory, for a file).

    Raises:
        ConfigError: If either config is malformed.
        IndexBuildError: If no library is found.
    """
    path = path.resolve()
    start = path if path.is_dir() else path.parent

    bootstrap = load_config(start, **overrides)
    locator = locator or LibraryLocator.from_config(bootstrap.source)
    location = locator.require(start)
    return location, load_config(location.root, **overrides)


def hints_disabled(file_path: Path, location: LibraryLocation, config: DefhintConfig) -> bool:
    """True if ``source.disable_from_root`` applies to ``file_path``."""
    if not (config.source.disable_from_root and is_root_file(file_path, location)):
        return False
    if config.source.msg_on_root_disabled:
        log.warning(
            "session.disabled_at_root",
            file=str(file_path.resolve()),
            root=str(location.root),
        )
    return True


def open_session(
    file_path: Path,
    *,
    locator: LibraryLocator | None = None,
    **overrides: Any,
) -> HintSession | None:
    """Create a session for the library above ``file_path``.

    Returns:
        The session, or None if no library was found or hints are disabled
        for this file.

    Raises:
        ConfigError: If either config is malformed.
    """
    try:
        location, config = load_library(file_path, locator=locator, **overrides)
    except IndexBuildError:
        return None
    if hints_disabled(file_path, location, config):
        return None
    return HintSession(config, location.source_file)
