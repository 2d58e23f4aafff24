"""Configuration management for fmv2fm2.

Supports loading configuration from:
1. Environment variables (FMV2FM2_*)
2. Config file (~/.fmv2fm2/config.yaml)
3. Default values

Example config file (~/.fmv2fm2/config.yaml):
    output:
      directory: "~/movies/fm2"
      overwrite: false
    conversion:
      include_comments: false
    logging:
      level: "INFO"
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".fmv2fm2" / "config.yaml",
    Path.home() / ".config" / "fmv2fm2" / "config.yaml",
    Path(".fmv2fm2.yaml"),
]


@dataclass
class OutputConfig:
    """Output file configuration."""

    directory: str | None = None
    overwrite: bool = True


@dataclass
class ConversionConfig:
    """Conversion behaviour configuration."""

    include_comments: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Fmv2Fm2Config:
    """Main configuration for fmv2fm2."""

    output: OutputConfig = field(default_factory=OutputConfig)
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations if locations is not None else CONFIG_LOCATIONS:
        if not config_path.exists():
            continue
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            warnings.warn(f"Ignoring unreadable config file {config_path}: {e}", stacklevel=2)
            continue
        return data if isinstance(data, dict) else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with FMV2FM2_ prefix."""
    return os.environ.get(f"FMV2FM2_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def _env_or(key: str, section: dict[str, Any], name: str, default: Any) -> Any:
    """Return an environment override, else the file value, else the default."""
    value = _get_env(key)
    if value is not None:
        return value
    return section.get(name, default)


def _bool_env_or(key: str, section: dict[str, Any], name: str, default: bool) -> bool:
    value = _parse_bool(_get_env(key))
    if value is not None:
        return value
    return bool(section.get(name, default))


def load_config(locations: list[Path] | None = None) -> Fmv2Fm2Config:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (FMV2FM2_*)
    2. Config file (~/.fmv2fm2/config.yaml)
    3. Default values

    Args:
        locations: Config files to search instead of CONFIG_LOCATIONS
    """
    file_config = _load_yaml_config(locations)

    # Output config
    output_config = file_config.get("output") or {}
    directory = _env_or("OUTPUT_DIR", output_config, "directory", None)
    output = OutputConfig(
        directory=os.path.expanduser(directory) if directory else None,
        overwrite=_bool_env_or("OVERWRITE", output_config, "overwrite", True),
    )

    # Conversion config
    conversion_config = file_config.get("conversion") or {}
    conversion = ConversionConfig(
        include_comments=_bool_env_or(
            "INCLUDE_COMMENTS", conversion_config, "include_comments", False
        ),
    )

    # Logging config
    logging_config = file_config.get("logging") or {}
    logging = LoggingConfig(
        level=str(_env_or("LOG_LEVEL", logging_config, "level", "WARNING")).upper(),
    )

    return Fmv2Fm2Config(
        output=output,
        conversion=conversion,
        logging=logging,
    )


# Global config instance (lazy loaded)
_config: Fmv2Fm2Config | None = None


def get_config() -> Fmv2Fm2Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
