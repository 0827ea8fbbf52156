"""
NINO Validator Configuration - Centralized Settings
===================================================

All configurable parameters in one place.
Supports environment variable overrides and JSON/YAML config files.

Usage:
    from nino_validator.config import get_config, setup_logging
    config = get_config()
    setup_logging(config.logging)

Environment Variables:
    NINO_LOG_LEVEL=DEBUG
    NINO_LOG_FILE=/var/log/nino.log
    NINO_LOG_REDACT=false
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = ('.yaml', '.yml')


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes', 'on')


def _get_env_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        return _parse_bool(value)
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _coerce_logging_value(key: str, value: Any) -> Any:
    """Check a value read from a config file against the LoggingConfig field type."""
    if key == 'level':
        if isinstance(value, int) and not isinstance(value, bool):
            return logging.getLevelName(value)
        if isinstance(value, str):
            return value
    elif key == 'redact_values':
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return _parse_bool(value)
    elif key == 'log_file':
        if value is None or isinstance(value, str):
            return value
    elif isinstance(value, str):
        return value

    raise ConfigurationError(
        f"Invalid value for logging option {key}: {value!r} ({type(value).__name__})"
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('NINO_LOG_LEVEL', 'INFO')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('NINO_LOG_FILE')
    )

    # Mask NINO values in log messages (personal data)
    redact_values: bool = field(
        default_factory=lambda: _get_env_bool('NINO_LOG_REDACT', True)
    )


@dataclass
class NinoConfig:
    """Complete validator configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a JSON or YAML file, chosen by extension."""
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in _YAML_SUFFIXES and suffix != '.json':
            raise ConfigurationError(f"Unsupported config file type: {path.suffix}")

        with open(path, 'w') as f:
            if suffix in _YAML_SUFFIXES:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False)
            else:
                json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'NinoConfig':
        """Load configuration from a JSON or YAML file."""
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in _YAML_SUFFIXES and suffix != '.json':
            raise ConfigurationError(f"Unsupported config file type: {path.suffix}")

        try:
            with open(path) as f:
                if suffix in _YAML_SUFFIXES:
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {path} must contain a mapping")

        config = cls()

        if 'logging' in data:
            if not isinstance(data['logging'], dict):
                raise ConfigurationError(f"'logging' section in {path} must be a mapping")
            for key, value in data['logging'].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, _coerce_logging_value(key, value))
                else:
                    logger.warning(f"Ignoring unknown logging option: {key}")

        return config


# Global configuration instance (singleton pattern)
_config: Optional[NinoConfig] = None


def get_config() -> NinoConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = NinoConfig()
    return _config


def set_config(config: NinoConfig):
    """Replace the global configuration instance."""
    global _config
    _config = config


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def setup_logging(config: Optional[LoggingConfig] = None):
    """
    Configure root logging based on settings.

    Does nothing when the root logger already has handlers, so an
    application's own logging setup is never replaced.
    """
    if config is None:
        config = get_config().logging

    root = logging.getLogger()
    if root.handlers:
        logger.debug("Root logger already has handlers, leaving logging configuration unchanged")
        return

    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
    )
