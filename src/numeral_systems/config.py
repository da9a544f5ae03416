"""
Configuration management for the numeral-systems CLI.
"""
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .const import CONFIG_DIR_ENV, DEFAULT_RADIX, SUPPORTED_RADIXES, Radix
from .exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


def default_config_dir() -> Path:
    """Return the configuration directory, honouring NUMERAL_SYSTEMS_CONFIG_DIR."""
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".config" / "numeral-systems"


class Config:
    """Configuration manager for the numeral-systems CLI."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory holding config.yaml. If None, uses
                     NUMERAL_SYSTEMS_CONFIG_DIR or ~/.config/numeral-systems.
        """
        if config_dir is None:
            self.config_dir = default_config_dir()
        else:
            self.config_dir = Path(config_dir)

        self.config_file = self.config_dir / "config.yaml"
        self._config: dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding='utf-8') as f:
                    loaded = yaml.safe_load(f)
            except (yaml.YAMLError, OSError) as e:
                _LOGGER.warning("Failed to read config file %s: %s", self.config_file, e)
                loaded = None
            self._config = loaded if isinstance(loaded, dict) else {}
        else:
            _LOGGER.debug("Config file does not exist: %s", self.config_file)
            self._config = {}

    def save(self) -> None:
        """Save configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                yaml.dump(self._config, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {self.config_file}: {e}"
            ) from e
        _LOGGER.debug("Configuration saved to %s", self.config_file)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'defaults.radix')
            default: Default value if key is not found

        Returns:
            The configuration value or the default if not found
        """
        value = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-notation key and save.

        Args:
            key: Dot-notation key (e.g., 'output.table')
            value: Value to set
        """
        keys = key.split('.')
        current = self._config

        # Navigate to the parent dict, creating nested dicts as needed
        for k in keys[:-1]:
            if k not in current or not isinstance(current[k], dict):
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value
        self.save()

    def get_default_radix(self) -> Radix:
        """Return the radix used when a command is given none.

        Raises:
            ConfigurationError: If the stored radix is not 8, 10 or 16.
        """
        value = self.get('defaults.radix', int(DEFAULT_RADIX))
        if isinstance(value, bool) or not isinstance(value, int) or value not in SUPPORTED_RADIXES:
            raise ConfigurationError(
                f"Unsupported default radix in {self.config_file}: {value!r}"
            )
        return Radix(value)

    def set_default_radix(self, radix: int) -> None:
        if isinstance(radix, bool) or not isinstance(radix, int) or radix not in SUPPORTED_RADIXES:
            raise ConfigurationError(f"Unsupported default radix: {radix!r}")
        self.set('defaults.radix', int(radix))

    def get_show_table(self) -> bool:
        """Whether convert should print all radixes as a table."""
        return bool(self.get('output.table', False))
