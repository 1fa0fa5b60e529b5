"""
Configuration management for shunt-calc.

Handles loading configuration from environment variables, YAML files,
and provides sensible defaults for all settings.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be used."""
    pass


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHUNT_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    # REPL settings
    prompt: str = ">> "
    exit_command: str = "exit"
    goodbye_message: str = "Goodbye."

    # Evaluation settings
    precision: int = Field(3, ge=0, le=15)  # Digits after the decimal point
    strict_parens: bool = True  # Reject a "(" left open at end of input


def load_yaml_config(path: Path) -> dict[str, Any]:
    """
    Read a YAML mapping of setting names to values.

    A missing or empty file yields an empty mapping. Raises ConfigurationError
    when the file is not valid YAML or its top level is not a mapping.
    """
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path}: invalid YAML ({e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path}: expected a mapping of settings, got {type(data).__name__}"
        )
    return data


def load_settings(config_path: Path | None = None, **overrides: Any) -> Settings:
    """
    Build Settings from environment, an optional YAML file and overrides.

    Overrides win over YAML values, which win over the environment.
    ``None`` overrides are ignored so unset CLI options fall through.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(load_yaml_config(config_path))
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output to stderr, filtered at ``level``."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# Library callers get stderr output at WARNING unless they configure structlog themselves
if not structlog.is_configured():
    configure_logging()
