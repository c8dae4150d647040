"""
Configuration loading for tdd-primer.

Configuration values are resolved using the following precedence:

1. Environment variables (e.g., TDDPRIMER_DELIMITER)
2. A TOML file: the explicit path passed to `load_config`, else the file
   named by TDDPRIMER_CONFIG_FILE, else `tddprimer.toml` if present in the
   working directory
3. Built-in defaults

Example `tddprimer.toml`:

    [logging]
    level = "DEBUG"
    format = "json"

    [joiner]
    delimiter = ", "
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tddprimer.exceptions import ConfigError

__all__ = [
    "ConfigError",
    "JoinerConfig",
    "LoggingConfig",
    "PrimerConfig",
    "load_config",
]


DEFAULT_CONFIG_FILE = Path("tddprimer.toml")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"json", "console"}


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("console", description="Renderer: json or console")

    model_config = ConfigDict(frozen=True)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_FORMATS:
            raise ValueError(f"unknown log format: {value}")
        return normalized


class JoinerConfig(BaseModel):
    """Defaults for DelimitedJoiner instances built from configuration."""

    delimiter: str = Field(",", description="Separator placed between items")

    model_config = ConfigDict(frozen=True)


class PrimerConfig(BaseModel):
    """Top-level configuration object."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    joiner: JoinerConfig = Field(default_factory=JoinerConfig)

    model_config = ConfigDict(frozen=True)


def load_config(config_path: Optional[Path | str] = None) -> PrimerConfig:
    """
    Load configuration from environment/file/defaults.

    Args:
        config_path: Optional explicit path to a `tddprimer.toml` file.

    Returns:
        PrimerConfig populated with the resolved values.

    Raises:
        ConfigError: if the config file does not exist, cannot be parsed,
            or holds invalid values.
    """

    raw_data = _load_toml_data(config_path)
    logging_data = raw_data.get("logging", {})
    joiner_data = raw_data.get("joiner", {})

    level = _env_or_value(
        "TDDPRIMER_LOG_LEVEL",
        logging_data.get("level"),
        LoggingConfig().level,
    )
    log_format = _env_or_value(
        "TDDPRIMER_LOG_FORMAT",
        logging_data.get("format"),
        LoggingConfig().format,
    )
    # An empty delimiter is valid, so only None falls through to the default
    delimiter = os.getenv("TDDPRIMER_DELIMITER")
    if delimiter is None:
        delimiter = joiner_data.get("delimiter", JoinerConfig().delimiter)

    try:
        return PrimerConfig(
            logging=LoggingConfig(level=level, format=log_format),
            joiner=JoinerConfig(delimiter=delimiter),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _load_toml_data(config_path: Optional[Path | str]) -> Dict[str, Any]:
    """Load data from a TOML file if one can be resolved."""

    resolved = _resolve_config_path(config_path)
    if resolved is None:
        return {}

    if not resolved.exists():
        raise ConfigError(f"Configuration file not found: {resolved}")

    try:
        with resolved.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Cannot parse {resolved}: {exc}") from exc


def _resolve_config_path(config_path: Optional[Path | str]) -> Optional[Path]:
    """Resolve configuration path with environment fallback."""

    if config_path:
        return Path(config_path)

    env_path = os.getenv("TDDPRIMER_CONFIG_FILE")
    if env_path:
        return Path(env_path)

    return DEFAULT_CONFIG_FILE if DEFAULT_CONFIG_FILE.exists() else None


def _env_or_value(env_var: str, value: Any, default: Any) -> str:
    """Return environment variable value if set, otherwise fallback to provided/default values."""

    env_value = os.getenv(env_var)
    if env_value is not None:
        return env_value
    if value is not None:
        return str(value)
    return str(default)
