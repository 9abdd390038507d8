"""CLI utilities."""

from .config import CliConfig, ConfigError, ConfigManager
from .validation import clean_key_material, validate_created

__all__ = [
    "CliConfig",
    "ConfigError",
    "ConfigManager",
    "clean_key_material",
    "validate_created",
]
