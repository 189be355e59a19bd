"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (DEFHINT__SECTION__KEY)
3. Library YAML (<root>/.defhint/config.yaml)
4. Global YAML (~/.config/defhint/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    DEFHINT__<SECTION>__<KEY>=<VALUE>

Examples:
    DEFHINT__LOGGING__LEVEL=DEBUG
    DEFHINT__HINTS__ADD_PARAM_DEFAULTS=true
    DEFHINT__SOURCE__LIBRARY_DIR=mylib
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from defhint.config.constants import (
    DEFAULT_BLOCKED_PARAMS,
    DEFAULT_CLASS_KEYWORD,
    DEFAULT_CONSTRUCTOR_NAME,
    DEFAULT_DEF_KEYWORD,
    DEFAULT_ENTRY_FILE,
    DEFAULT_LIBRARY_DIR,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _check_identifier(value: str, what: str) -> str:
    if not value.isidentifier():
        raise ValueError(f"{what} must be an identifier, got {value!r}")
    return value


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        DEFHINT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports index builds, DEBUG every unparsed header.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class HintsConfig(BaseModel):
    """Name mapping and filtering applied to hover and completion queries.

    Env vars:
        DEFHINT__HINTS__ADD_PARAM_DEFAULTS: Also offer "name=default" completions
    """

    model_config = ConfigDict(extra="forbid")

    mapping: dict[str, str] = Field(
        default_factory=dict,
        description="Alias -> canonical name table. Aliases are the names typed in "
        "user code, canonical names are the ones defined in the indexed source.",
    )
    blocked_canonical: set[str] = Field(
        default_factory=set,
        description="Canonical names that never resolve.",
    )
    blocked_alias: set[str] = Field(
        default_factory=set,
        description="As-typed tokens that never resolve.",
    )
    blocked_params: set[str] = Field(
        default_factory=lambda: set(DEFAULT_BLOCKED_PARAMS),
        description="Parameter names dropped from the index and from completions.",
    )
    add_param_defaults: bool = Field(
        default=False,
        description="Emit an extra 'name=default' completion for parameters with defaults.",
    )
    reserved_field_names: set[str] = Field(
        default_factory=set,
        description="Member names never offered by member completion.",
    )

    @field_validator("mapping")
    @classmethod
    def validate_mapping(cls, v: dict[str, str]) -> dict[str, str]:
        for alias, canonical in v.items():
            _check_identifier(alias, "Alias")
            _check_identifier(canonical, "Canonical name")
            if alias == canonical:
                raise ValueError(f"Alias {alias!r} maps to itself")
        return v


class SourceConfig(BaseModel):
    """Where the indexed library lives relative to the edited file.

    Env vars:
        DEFHINT__SOURCE__LIBRARY_DIR: Library directory searched for upwards
        DEFHINT__SOURCE__ENTRY_FILE: Module inside the library that gets indexed
    """

    model_config = ConfigDict(extra="forbid")

    library_dir: str = Field(
        default=DEFAULT_LIBRARY_DIR,
        description="Directory name searched for in the edited file's ancestors.",
    )
    entry_file: str = Field(
        default=DEFAULT_ENTRY_FILE,
        description="File inside the library directory that gets indexed.",
    )
    disable_from_root: bool = Field(
        default=False,
        description="Disable hints for files located directly in the library's root directory.",
    )
    msg_on_root_disabled: bool = Field(
        default=True,
        description="Log a notice when hints are disabled by disable_from_root.",
    )

    @field_validator("library_dir", "entry_file")
    @classmethod
    def validate_plain_name(cls, v: str) -> str:
        if not v or Path(v).name != v:
            raise ValueError(f"Must be a plain file or directory name, got {v!r}")
        return v


class DialectConfig(BaseModel):
    """Keywords of the indexed dialect."""

    model_config = ConfigDict(extra="forbid")

    def_keyword: str = DEFAULT_DEF_KEYWORD
    class_keyword: str = DEFAULT_CLASS_KEYWORD
    constructor_name: str = DEFAULT_CONSTRUCTOR_NAME

    @field_validator("def_keyword", "class_keyword", "constructor_name")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        return _check_identifier(v, "Dialect keyword")

    @model_validator(mode="after")
    def validate_distinct(self) -> "DialectConfig":
        if self.def_keyword == self.class_keyword:
            raise ValueError("def_keyword and class_keyword must differ")
        return self


class DefhintConfig(BaseModel):
    """Root configuration for defhint.

    All settings can be configured via:
    1. Environment variables: DEFHINT__SECTION__KEY
    2. YAML config files (library or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    hints: HintsConfig = Field(default_factory=HintsConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    dialect: DialectConfig = Field(default_factory=DialectConfig)
