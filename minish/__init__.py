"""
minish - A small interactive command-line shell

Quote-aware tokenizing, a handful of builtins (exit, echo, pwd, cd,
type), external commands found on PATH, and stdout/stderr redirection
to files.
"""

import logging

__version__ = "1.0.0"
__author__ = "YSNRFD"

logging.getLogger('minish').addHandler(logging.NullHandler())

# Import main components for convenience
from .core.state import ShellState, EnvVar
from .shell.shell import Shell, create_shell

__all__ = [
    'ShellState',
    'EnvVar',
    'Shell',
    'create_shell',
]
