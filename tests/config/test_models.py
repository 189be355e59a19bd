"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- HintsConfig model
- SourceConfig model
- DialectConfig model
- DefhintConfig root model
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from defhint.config.models import (
    DefhintConfig,
    DialectConfig,
    HintsConfig,
    LoggingConfig,
    LogOutputConfig,
    SourceConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_absolute_path_destination(self) -> None:
        """Absolute path is valid destination."""
        config = LogOutputConfig(destination="/var/log/defhint.log")
        assert config.destination == "/var/log/defhint.log"

    def test_relative_path_fails(self) -> None:
        """Relative path is rejected."""
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/app.log")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert len(config.outputs) == 1

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(lvl="DEBUG")  # type: ignore[call-arg]


class TestHintsConfig:
    """Tests for HintsConfig model."""

    def test_defaults(self) -> None:
        config = HintsConfig()
        assert config.mapping == {}
        assert config.blocked_canonical == set()
        assert config.blocked_alias == set()
        assert config.blocked_params == {"self"}
        assert config.add_param_defaults is False
        assert config.reserved_field_names == set()

    def test_lists_become_sets(self) -> None:
        """YAML lists load into sets."""
        config = HintsConfig(blocked_params=["self", "cls", "self"])  # type: ignore[arg-type]
        assert config.blocked_params == {"self", "cls"}

    def test_mapping_accepts_identifiers(self) -> None:
        config = HintsConfig(mapping={"csSession": "crshSession"})
        assert config.mapping == {"csSession": "crshSession"}

    @pytest.mark.parametrize(
        "mapping",
        [
            {"not valid": "name"},
            {"alias": "dotted.name"},
            {"same": "same"},
        ],
    )
    def test_mapping_rejects_malformed_entries(self, mapping: dict[str, str]) -> None:
        with pytest.raises(ValidationError):
            HintsConfig(mapping=mapping)

    def test_mapping_must_be_mapping(self) -> None:
        with pytest.raises(ValidationError):
            HintsConfig(mapping=["a", "b"])  # type: ignore[arg-type]


class TestSourceConfig:
    """Tests for SourceConfig model."""

    def test_defaults(self) -> None:
        config = SourceConfig()
        assert config.library_dir == "cslib"
        assert config.entry_file == "main.py"
        assert config.disable_from_root is False
        assert config.msg_on_root_disabled is True

    @pytest.mark.parametrize("value", ["", "a/b", "../lib"])
    def test_rejects_paths(self, value: str) -> None:
        with pytest.raises(ValidationError, match="plain file or directory name"):
            SourceConfig(library_dir=value)


class TestDialectConfig:
    """Tests for DialectConfig model."""

    def test_defaults(self) -> None:
        config = DialectConfig()
        assert (config.def_keyword, config.class_keyword, config.constructor_name) == (
            "def",
            "class",
            "__init__",
        )

    def test_rejects_non_identifier_keyword(self) -> None:
        with pytest.raises(ValidationError, match="identifier"):
            DialectConfig(def_keyword="de f")

    def test_rejects_equal_keywords(self) -> None:
        with pytest.raises(ValidationError, match="must differ"):
            DialectConfig(def_keyword="fn", class_keyword="fn")


class TestDefhintConfig:
    """Tests for the root config model."""

    def test_all_sections_default(self) -> None:
        config = DefhintConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.hints, HintsConfig)
        assert isinstance(config.source, SourceConfig)
        assert isinstance(config.dialect, DialectConfig)
