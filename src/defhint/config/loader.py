"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (DEFHINT__SECTION__KEY)
3. Library config (<root>/.defhint/config.yaml)
4. Global config (~/.config/defhint/config.yaml)
5. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from defhint.config.constants import CONFIG_DIR_NAME
from defhint.config.models import (
    DefhintConfig,
    DialectConfig,
    HintsConfig,
    LoggingConfig,
    SourceConfig,
)
from defhint.core.errors import ConfigError

log = structlog.get_logger(__name__)

GLOBAL_CONFIG_PATH = Path("~/.config/defhint/config.yaml").expanduser()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source."""

    class DefhintSettings(BaseSettings):
        """Root config. Env vars: DEFHINT__LOGGING__LEVEL, DEFHINT__HINTS__MAPPING, etc."""

        model_config = SettingsConfigDict(
            env_prefix="DEFHINT__",
            env_nested_delimiter="__",
            case_sensitive=False,
            extra="forbid",
        )

        logging: LoggingConfig = LoggingConfig()
        hints: HintsConfig = HintsConfig()
        source: SourceConfig = SourceConfig()
        dialect: DialectConfig = DialectConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return DefhintSettings


DefhintSettings = _make_settings_class({})


def load_config(root: Path | None = None, **kwargs: Any) -> DefhintConfig:
    """Load config: defaults < global config < library config < env vars < kwargs.

    Args:
        root: Directory holding the library and its .defhint/ folder.
              Defaults to current working directory.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    root = root or Path.cwd()
    local_path = root / CONFIG_DIR_NAME / "config.yaml"

    yaml_config = _deep_merge(_load_yaml(GLOBAL_CONFIG_PATH), _load_yaml(local_path))

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e

    log.debug("config.loaded", root=str(root), local=local_path.exists())
    return DefhintConfig.model_validate(settings.model_dump())
