"""
Generator Configuration - Centralized Settings
==============================================

All configurable parameters in one place.
Supports environment variable overrides and YAML/JSON config files.

Usage:
    from mrn_generator.config import get_config
    config = get_config()
    print(config.generator.check_scheme)

Environment Variables:
    MRN_CHECK_SCHEME=iso6346
    MRN_SEED=42
    MRN_DEFAULT_COUNT=10
    MRN_LOG_LEVEL=DEBUG
    MRN_LOG_FILE=mrn.log
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

from .core import CHECK_SCHEMES, ConfigurationError

logger = logging.getLogger(__name__)


def _get_env_int(key: str, default: Optional[int]) -> Optional[int]:
    """Get int from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid int for {key}: {value}, using default {default}")
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class GeneratorConfig:
    """MRN generation settings."""

    check_scheme: str = field(
        default_factory=lambda: _get_env_str('MRN_CHECK_SCHEME', 'mod37')
    )

    # None draws fresh OS entropy for every run
    seed: Optional[int] = field(
        default_factory=lambda: _get_env_int('MRN_SEED', None)
    )

    default_count: int = field(
        default_factory=lambda: _get_env_int('MRN_DEFAULT_COUNT', 1)
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('MRN_LOG_LEVEL', 'WARNING')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('MRN_LOG_FILE')
    )


@dataclass
class AppConfig:
    """Complete application configuration."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'AppConfig':
        """
        Check value types and ranges.

        Raises:
            ConfigurationError: On an unknown check scheme, a non-positive count,
                a negative or non-integer seed, or a non-string log setting
        """
        generator = self.generator
        if not isinstance(generator.check_scheme, str) or generator.check_scheme not in CHECK_SCHEMES:
            raise ConfigurationError(
                f"Invalid check scheme: '{generator.check_scheme}'. "
                f"Valid schemes: {sorted(CHECK_SCHEMES)}"
            )
        if not _is_int(generator.default_count) or generator.default_count < 1:
            raise ConfigurationError(
                f"default_count must be a positive integer, got {generator.default_count!r}"
            )
        if generator.seed is not None and (not _is_int(generator.seed) or generator.seed < 0):
            raise ConfigurationError(
                f"seed must be a non-negative integer, got {generator.seed!r}"
            )
        if not isinstance(self.logging.level, str):
            raise ConfigurationError(
                f"logging level must be a level name, got {self.logging.level!r}"
            )
        if self.logging.log_file is not None and not isinstance(self.logging.log_file, str):
            raise ConfigurationError(
                f"log_file must be a path string, got {self.logging.log_file!r}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a YAML or JSON file."""
        path = Path(path)
        suffix = _file_format(path)
        with open(path, 'w') as f:
            if suffix == 'yaml':
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False)
            else:
                json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path], validate: bool = True) -> 'AppConfig':
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Config file ending in .yaml, .yml or .json
            validate: Check the loaded values before returning; pass False to
                apply further overrides first and call ``validate()`` after

        Raises:
            ConfigurationError: If the file cannot be parsed or is not laid
                out as sections of settings
        """
        path = Path(path)
        suffix = _file_format(path)
        with open(path) as f:
            try:
                data = yaml.safe_load(f) if suffix == 'yaml' else json.load(f)
            except (yaml.YAMLError, ValueError) as e:
                raise ConfigurationError(f"Cannot parse config file {path}: {e}") from e
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        config = cls()

        for section in ('generator', 'logging'):
            settings = data.get(section) or {}
            if not isinstance(settings, dict):
                raise ConfigurationError(
                    f"Section '{section}' in {path} must be a mapping, got {settings!r}"
                )
            target = getattr(config, section)
            for key, value in settings.items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown {section} setting '{key}' in {path}")

        return config.validate() if validate else config


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _file_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return 'yaml'
    if suffix == '.json':
        return 'json'
    raise ConfigurationError(
        f"Unsupported config file format: '{path.name}'. Use .yaml, .yml or .json"
    )


# Global configuration instance (singleton pattern)
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = AppConfig().validate()
        setup_logging(_config.logging)
    return _config


def set_config(config: AppConfig) -> AppConfig:
    """Replace the global configuration (e.g. with one loaded from a file)."""
    global _config
    _config = config.validate()
    return _config


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def setup_logging(config: LoggingConfig, verbose: bool = False):
    """Configure logging based on settings."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.level.upper(), logging.WARNING)

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
    )
