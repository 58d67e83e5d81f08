"""
minish Configuration Loader

Configuration management for the shell:
- JSON configuration file loading
- Default value handling
- Typed access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

from minish.exceptions import ConfigError


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = "$ "
    default_home: str = "/"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False
    use_colors: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the shell.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files and providing runtime
    configuration access. Sections and keys that are missing from the
    file keep their defaults.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('minish.json')
        >>> print(config.shell.prompt)
        $
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file: {e}")

        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a JSON object")

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'shell' in data:
            shell_data = self._section(data, 'shell')
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
                default_home=shell_data.get('default_home', config.shell.default_home),
            )

        if 'logging' in data:
            log_data = self._section(data, 'logging')
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )

        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data[name]
        if not isinstance(section, dict):
            raise ConfigError(f"Configuration section '{name}' must be a JSON object")
        return section

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def reset(self) -> None:
        """Drop any loaded configuration and go back to defaults."""
        self._config = Config()
        self._loaded = False


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
