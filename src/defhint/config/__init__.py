"""Config module exports."""

from defhint.config.loader import DefhintSettings, load_config
from defhint.config.models import (
    DefhintConfig,
    DialectConfig,
    HintsConfig,
    LoggingConfig,
    LogOutputConfig,
    SourceConfig,
)

__all__ = [
    "load_config",
    "DefhintConfig",
    "DefhintSettings",
    "DialectConfig",
    "HintsConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "SourceConfig",
]
