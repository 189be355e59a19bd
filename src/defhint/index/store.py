"""Ownership of the index for one source file.

The index is built lazily on first access and replaced only by an explicit
rebuild. A rebuild that cannot read the source leaves the current index in
place.
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

import structlog

from defhint.config.models import DialectConfig
from defhint.core.errors import IndexBuildError
from defhint.index.indexer import build_index
from defhint.index.models import Index

log = structlog.get_logger(__name__)


class IndexStore:
    """Lazily built, explicitly rebuilt index of a single module."""

    def __init__(
        self,
        source_path: Path,
        *,
        dialect: DialectConfig | None = None,
        blocked_params: Collection[str] = (),
    ) -> None:
        self.source_path = source_path
        self._dialect = dialect or DialectConfig()
        self._blocked_params = frozenset(blocked_params)
        self._index: Index | None = None
        self._generation = 0

    @property
    def index(self) -> Index:
        """The current index, built on first access."""
        if self._index is None:
            self.rebuild()
        assert self._index is not None
        return self._index

    @property
    def generation(self) -> int:
        """Number of successful builds so far."""
        return self._generation

    @property
    def is_built(self) -> bool:
        return self._index is not None

    def _read_source(self) -> str:
        try:
            return self.source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IndexBuildError.source_unreadable(str(self.source_path), str(e)) from e

    def rebuild(self, *, strict: bool = False) -> bool:
        """Re-read the source file and replace the index.

        Args:
            strict: Raise instead of keeping the previous index on failure.

        Returns:
            True if a new index was installed.

        Raises:
            IndexBuildError: If ``strict`` and the source cannot be read.
        """
        try:
            source = self._read_source()
        except IndexBuildError as e:
            log.warning(
                "index.rebuild_failed",
                path=str(self.source_path),
                reason=e.details.get("reason"),
                kept_previous=self._index is not None,
            )
            if self._index is None:
                self._index = {}
            if strict:
                raise
            return False

        index = build_index(source, dialect=self._dialect, blocked_params=self._blocked_params)
        self._index = index
        self._generation += 1
        log.info(
            "index.built",
            path=str(self.source_path),
            definitions=len(index),
            generation=self._generation,
        )
        return True
