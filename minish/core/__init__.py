"""
minish Core Module

Session state and configuration.
"""

from .state import ShellState, EnvVar
from .config_loader import (
    Config,
    ConfigLoader,
    ShellConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'ShellState',
    'EnvVar',
    'Config',
    'ConfigLoader',
    'ShellConfig',
    'LoggingConfig',
    'get_config',
]
