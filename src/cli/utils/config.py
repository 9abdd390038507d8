"""Configuration file management for CLI."""

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SIN_LOG_LEVEL"
_LOG_LEVELS = frozenset(("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))


@dataclass(frozen=True)
class CliConfig:
    """CLI configuration loaded from config file."""

    mask_private: bool = True
    log_level: str = "WARNING"


class ConfigError(Exception):
    """Configuration file error."""

    pass


class ConfigManager:
    """Manages CLI configuration in ~/.sin/config.yaml."""

    DEFAULT_DIR = Path.home() / ".sin"
    CONFIG_FILE = "config.yaml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self._config_dir = config_dir or self.DEFAULT_DIR
        self._config_path = self._config_dir / self.CONFIG_FILE

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def config_path(self) -> Path:
        return self._config_path

    def exists(self) -> bool:
        """Check if configuration exists."""
        return self._config_path.exists()

    def load(self) -> CliConfig:
        """Load configuration, falling back to defaults when no file exists.

        The ``SIN_LOG_LEVEL`` environment variable overrides the file's
        ``log_level``. Raises ConfigError if the file cannot be used.
        """
        data: object = {}
        if self._config_path.exists():
            with open(self._config_path) as f:
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"Invalid config file: {e}") from e
        else:
            logger.debug("No config at %s, using defaults", self._config_path)

        if not isinstance(data, dict):
            raise ConfigError("Invalid config: expected a mapping of settings")

        mask_private = data.get("mask_private", True)
        if not isinstance(mask_private, bool):
            raise ConfigError("Invalid config: mask_private must be true or false")

        log_level = str(os.environ.get(LOG_LEVEL_ENV) or data.get("log_level", "WARNING")).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level {log_level!r}, expected one of: {', '.join(sorted(_LOG_LEVELS))}"
            )

        return CliConfig(mask_private=mask_private, log_level=log_level)

    def save(self, config: CliConfig) -> None:
        """Save configuration to file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, "w") as f:
            yaml.safe_dump(asdict(config), f, default_flow_style=False)
