"""Configuration management for slugger.

Loads configuration from:
1. $SLUGGER_CONFIG, when set
2. slugger.yaml in current directory
3. ~/.config/slugger/slugger.yaml
4. Environment variables (SLUGGER_* prefix)

The configuration only supplies defaults to the CLI and helpers;
``slugify`` itself never reads it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slugger.options import SlugOptions

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read."""


class SlugConfig(BaseModel):
    """Default slug options."""

    separator: str = "-"
    lowercase: bool = True
    trim: bool = True
    strict: bool = True
    max_length: int | None = None
    replacements: dict[str, str] = Field(default_factory=dict)

    def to_options(self) -> SlugOptions:
        """Return these defaults as a SlugOptions record."""
        return SlugOptions(
            separator=self.separator,
            lowercase=self.lowercase,
            trim=self.trim,
            strict=self.strict,
            max_length=self.max_length,
            replacements=dict(self.replacements),
        )


class BenchmarkConfig(BaseModel):
    """Benchmark defaults."""

    iterations: int = Field(default=10000, ge=1)
    warmup: int = Field(default=100, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(message)s"
    file: Path | None = None


class Config(BaseSettings):
    """Main configuration for slugger."""

    model_config = SettingsConfigDict(
        env_prefix="SLUGGER_",
        env_nested_delimiter="__",
    )

    slug: SlugConfig = Field(default_factory=SlugConfig)
    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def find_config_file() -> Path | None:
    """Find the configuration file.

    Searches in order:
    1. $SLUGGER_CONFIG
    2. ./slugger.yaml
    3. ~/.config/slugger/slugger.yaml
    """
    env_path = os.environ.get("SLUGGER_CONFIG")
    if env_path:
        path = Path(env_path).expanduser()
        return path if path.exists() else None

    locations = [
        Path.cwd() / "slugger.yaml",
        Path.home() / ".config" / "slugger" / "slugger.yaml",
    ]

    for path in locations:
        if path.exists():
            return path

    return None


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file '{path}' is not valid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Config file '{path}' could not be read: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")
    return data


def load_config() -> Config:
    """Load configuration from file and environment.

    Returns:
        Config: The loaded configuration.

    Raises:
        ConfigError: If the config file is unreadable or not a mapping.
    """
    config_data: dict[str, Any] = {}

    # Load from file if exists
    config_file = find_config_file()
    if config_file:
        config_data = _read_config_file(config_file)
        logger.debug("Loaded configuration from %s", config_file)

    # Environment overrides for common settings
    env_overrides = {
        "SLUGGER_SEPARATOR": ("slug", "separator"),
        "SLUGGER_MAX_LENGTH": ("slug", "max_length"),
        "SLUGGER_LOG_LEVEL": ("logging", "level"),
    }

    for env_var, path in env_overrides.items():
        value = os.environ.get(env_var)
        if value:
            section, key = path
            if not isinstance(config_data.get(section), dict):
                config_data[section] = {}
            config_data[section][key] = value

    return Config(**config_data)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The configuration instance.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
