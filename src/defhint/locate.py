"""Discovery of the indexed library from an edited file's location.

Walks up from the edited file looking for a directory that contains the
library folder (``cslib`` by default). The directory holding that folder is
the library *root*; the indexed module is ``<root>/<library_dir>/<entry_file>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from defhint.config.constants import DEFAULT_ENTRY_FILE, DEFAULT_LIBRARY_DIR
from defhint.config.models import SourceConfig
from defhint.core.errors import IndexBuildError

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LibraryLocation:
    """Resolved library paths."""

    root: Path
    library_dir: Path
    source_file: Path


class LibraryLocator:
    """Finds and caches library locations per starting directory.

    Cached results (including misses) live as long as the locator, until
    ``invalidate()`` is called.
    """

    def __init__(
        self,
        library_dir: str = DEFAULT_LIBRARY_DIR,
        entry_file: str = DEFAULT_ENTRY_FILE,
    ) -> None:
        self.library_dir = library_dir
        self.entry_file = entry_file
        self._cache: dict[Path, LibraryLocation | None] = {}

    @classmethod
    def from_config(cls, source: SourceConfig) -> LibraryLocator:
        return cls(source.library_dir, source.entry_file)

    def locate(self, start: Path) -> LibraryLocation | None:
        """Find the library above ``start`` (a file or a directory).

        Returns:
            The location, or None if no ancestor holds the library folder or
            the folder has no entry file.
        """
        start = start.resolve()
        if not start.is_dir():
            start = start.parent

        if start in self._cache:
            return self._cache[start]

        location = self._walk(start)
        self._cache[start] = location
        return location

    def require(self, start: Path) -> LibraryLocation:
        """Like ``locate()``, but a missing library is an error.

        Raises:
            IndexBuildError: If no library with an entry file is found.
        """
        location = self.locate(start)
        if location is None:
            raise IndexBuildError.source_not_found(
                str(start), f"{self.library_dir}/{self.entry_file}"
            )
        return location

    def _walk(self, start: Path) -> LibraryLocation | None:
        current = start
        while True:
            candidate = current / self.library_dir
            if candidate.is_dir():
                source_file = candidate / self.entry_file
                if not source_file.is_file():
                    log.info("locate.entry_missing", library=str(candidate), entry=self.entry_file)
                    return None
                log.debug("locate.found", start=str(start), root=str(current))
                return LibraryLocation(root=current, library_dir=candidate, source_file=source_file)
            if current.parent == current:
                log.debug("locate.not_found", start=str(start), marker=self.library_dir)
                return None
            current = current.parent

    def invalidate(self, start: Path | None = None) -> None:
        """Forget cached locations, for one starting directory or all of them."""
        if start is None:
            self._cache.clear()
            return
        start = start.resolve()
        if not start.is_dir():
            start = start.parent
        self._cache.pop(start, None)


def is_root_file(file_path: Path, location: LibraryLocation) -> bool:
    """True if ``file_path`` lives directly in the library's root directory."""
    return file_path.resolve().parent == location.root
