"""defhint error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Index
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Index (3xxx)
    INDEX_SOURCE_UNREADABLE = 3001
    INDEX_SOURCE_NOT_FOUND = 3002


# Not frozen: the interpreter, click and contextlib set __traceback__ and
# __cause__ on exceptions as they propagate.
@dataclass(eq=False)
class DefhintError(Exception):
    """Base error with structured context for CLI and host responses."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(DefhintError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class IndexBuildError(DefhintError):
    """Errors raised while finding or reading the indexed source file."""

    @classmethod
    def source_unreadable(cls, path: str, reason: str) -> "IndexBuildError":
        return cls(
            code=ErrorCode.INDEX_SOURCE_UNREADABLE,
            message=f"Cannot read source file {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def source_not_found(cls, start: str, marker: str) -> "IndexBuildError":
        return cls(
            code=ErrorCode.INDEX_SOURCE_NOT_FOUND,
            message=f"No library '{marker}' found in {start} or any parent directory",
            details={"start": start, "marker": marker},
        )
