"""
Settings File Loading

Optional YAML settings for the process-default naming service and for the
logging layer. Features:
- Single-file YAML loading with environment variable resolution
- ``.env`` loading from the working directory before resolution
- Dot-notation access to raw values
- Validated ``entity_naming`` section (:class:`NamingSettings`)

File lookup order when no explicit path is given:
    1. ``ENTITY_NAMING_CONFIG`` environment variable
    2. ``entity_naming.yml`` in the current working directory

A missing default file is not an error; built-in defaults apply. An explicit
path (argument or environment variable) that does not exist is.

Example ``entity_naming.yml``::

    entity_naming:
      include_builtins: true
      max_unwrap: ${NAMING_MAX_UNWRAP:-8}
      map_prefer_elem: true
      registrations:
        "myapp.models:User": domain.user
    logging:
      rich_tracebacks: true
      logging_colors:
        naming_service: sky_blue2
"""

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from entity_naming.base.config import (
    DEFAULT_INCLUDE_BUILTINS,
    DEFAULT_MAP_PREFER_ELEM,
    DEFAULT_MAX_UNWRAP,
    NamingConfig,
)
from entity_naming.base.errors import ConfigurationError

# Use standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("NAMING_CONFIG")

CONFIG_ENV_VAR = "ENTITY_NAMING_CONFIG"
DEFAULT_CONFIG_FILENAME = "entity_naming.yml"
NAMING_SECTION = "entity_naming"

# Pattern matches ${VAR_NAME:-default}, ${VAR_NAME}, or $VAR_NAME
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


class NamingSettings(BaseModel):
    """Validated ``entity_naming`` section of the settings file.

    :param include_builtins: Default for :attr:`NamingConfig.include_builtins`
    :param max_unwrap: Default for :attr:`NamingConfig.max_unwrap`
    :param map_prefer_elem: Default for :attr:`NamingConfig.map_prefer_elem`
    :param registrations: ``"module:QualName"`` import targets mapped to entity names
    """

    model_config = ConfigDict(extra="forbid")

    include_builtins: bool = DEFAULT_INCLUDE_BUILTINS
    max_unwrap: int = DEFAULT_MAX_UNWRAP
    map_prefer_elem: bool = DEFAULT_MAP_PREFER_ELEM
    registrations: dict[str, str] = Field(default_factory=dict)

    def to_config(self) -> NamingConfig:
        return NamingConfig(
            include_builtins=self.include_builtins,
            max_unwrap=self.max_unwrap,
            map_prefer_elem=self.map_prefer_elem,
        )


class ConfigBuilder:
    """
    Loads one settings file and exposes its values.

    Args:
        config_path: Path to the settings file. If None, uses the
            ``ENTITY_NAMING_CONFIG`` environment variable or
            ``./entity_naming.yml`` when present.

    Raises:
        ConfigurationError: If an explicitly named file is missing or malformed.
    """

    def __init__(self, config_path: str | Path | None = None):
        # Environment variables must be available before substitution
        dotenv_path = Path.cwd() / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path, override=False)
            logger.debug(f"Loaded .env file from {dotenv_path}")

        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR) or None
        if config_path is None:
            cwd_config = Path.cwd() / DEFAULT_CONFIG_FILENAME
            if cwd_config.exists():
                config_path = cwd_config

        self.config_path: Path | None = Path(config_path) if config_path is not None else None
        if self.config_path is None:
            logger.debug("No settings file found, using built-in defaults")
            self._unexpanded_config: dict[str, Any] = {}
            self.raw_config: dict[str, Any] = {}
        else:
            self._unexpanded_config = self._load_yaml_file(self.config_path)
            self.raw_config = self._resolve_env_vars(copy.deepcopy(self._unexpanded_config))

    def _load_yaml_file(self, file_path: Path) -> dict[str, Any]:
        """Load and validate a YAML settings file."""
        if not file_path.is_file():
            raise ConfigurationError(f"Settings file not found: {file_path}")
        try:
            with open(file_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML settings {file_path}: {e}") from e

        if config is None:
            logger.warning(f"Settings file is empty: {file_path}")
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Settings file must contain a mapping: {file_path}")

        logger.debug(f"Loaded settings from {file_path}")
        return config

    def _resolve_env_vars(self, data: Any) -> Any:
        """Recursively resolve environment variables in settings data.

        Supports ``${VAR}``, ``${VAR:-default}`` and ``$VAR``. Unknown variables
        without a default are left untouched.
        """
        if isinstance(data, dict):
            return {key: self._resolve_env_vars(value) for key, value in data.items()}
        if isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        if not isinstance(data, str):
            return data

        def replace_env_var(match: re.Match) -> str:
            if match.group(1):
                var_name, default_value = match.group(1), match.group(2)
            else:
                var_name, default_value = match.group(3), None

            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            if default_value is not None:
                return default_value
            logger.info(f"Environment variable '{var_name}' not found, keeping original value")
            return match.group(0)

        return _ENV_VAR_PATTERN.sub(replace_env_var, data)

    def get_unexpanded_config(self) -> dict[str, Any]:
        """Return the settings with ``${VAR}`` placeholders preserved."""
        return copy.deepcopy(self._unexpanded_config)

    def get(self, path: str, default: Any = None) -> Any:
        """Get a value using dot notation path."""
        value: Any = self.raw_config
        try:
            for key in path.split("."):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

_default_config: ConfigBuilder | None = None

# Per-path cache for explicit settings paths
_config_cache: dict[str, ConfigBuilder] = {}


def _get_config(config_path: str | Path | None = None) -> ConfigBuilder:
    global _default_config

    if config_path is None:
        if _default_config is None:
            _default_config = ConfigBuilder()
        return _default_config

    resolved_path = str(Path(config_path).resolve())
    if resolved_path not in _config_cache:
        _config_cache[resolved_path] = ConfigBuilder(resolved_path)
    return _config_cache[resolved_path]


def get_config_value(path: str, default: Any = None, config_path: str | Path | None = None) -> Any:
    """
    Get a specific settings value by dot-separated path.

    Args:
        path: Dot-separated path (e.g., "logging.rich_tracebacks")
        default: Value returned when the path is not found
        config_path: Optional explicit settings file

    Raises:
        ValueError: If path is empty

    Examples:
        >>> get_config_value("entity_naming.max_unwrap", 8)
        8
    """
    if not path:
        raise ValueError("Configuration path cannot be empty or None")
    return _get_config(config_path).get(path, default)


def load_naming_settings(
    config_path: str | Path | None = None, *, builder: ConfigBuilder | None = None
) -> NamingSettings:
    """Validate and return the ``entity_naming`` section.

    The settings file is read fresh on every call, so ``ENTITY_NAMING_CONFIG``
    and the working directory are looked up at call time rather than whenever
    the cached builder happened to be created.

    Args:
        config_path: Explicit settings file, defaults to the standard lookup
        builder: Already loaded settings to validate instead of reading a file

    Raises:
        ConfigurationError: If the file cannot be loaded, or the section is not
            a mapping or fails validation.
    """
    if builder is None:
        builder = ConfigBuilder(config_path)
    section = builder.get(NAMING_SECTION)
    if section is None:
        return NamingSettings()
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{NAMING_SECTION}' must be a mapping in {builder.config_path}")
    try:
        return NamingSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid '{NAMING_SECTION}' settings: {e}") from e


def reset_config() -> None:
    """Forget every loaded settings file so the next access reloads from disk."""
    global _default_config
    _default_config = None
    _config_cache.clear()
