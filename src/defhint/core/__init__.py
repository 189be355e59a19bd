"""Core module exports."""

from defhint.core.errors import (
    ConfigError,
    DefhintError,
    ErrorCode,
    IndexBuildError,
)
from defhint.core.logging import configure_logging

__all__ = [
    # Errors
    "DefhintError",
    "ConfigError",
    "ErrorCode",
    "IndexBuildError",
    # Logging
    "configure_logging",
]
