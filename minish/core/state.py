"""
Shell Session State

The mutable state of one shell session: the working directory and the
few environment variables the shell itself reads.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Mapping


class EnvVar(Enum):
    """Environment variables the shell recognizes."""
    PATH = "PATH"
    HOME = "HOME"

    @classmethod
    def from_key(cls, key: str) -> Optional['EnvVar']:
        """Map a variable name to its EnvVar, or None if not recognized."""
        for var in cls:
            if var.value == key:
                return var
        return None


@dataclass
class ShellState:
    """
    Session state for one shell.

    The dispatch loop owns this object and hands it explicitly to every
    component that needs it. Only the cd builtin mutates it.

    Attributes:
        cwd: Current working directory, absolute and canonical
        environ: Values of the recognized environment variables
    """
    cwd: str
    environ: dict[EnvVar, str] = field(default_factory=dict)

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[str] = None,
        default_home: str = "/"
    ) -> 'ShellState':
        """
        Build the startup state from a process environment.

        Args:
            environ: Environment mapping (defaults to os.environ)
            cwd: Starting directory (defaults to the process directory)
            default_home: HOME value used when the environment has none

        Returns:
            A new ShellState
        """
        if environ is None:
            environ = os.environ
        start = cwd if cwd is not None else os.getcwd()
        return cls(
            cwd=os.path.realpath(start),
            environ={
                EnvVar.PATH: environ.get(EnvVar.PATH.value, ""),
                EnvVar.HOME: environ.get(EnvVar.HOME.value, default_home),
            },
        )

    def get(self, var: EnvVar, default: str = "") -> str:
        return self.environ.get(var, default)

    @property
    def home(self) -> str:
        return self.environ.get(EnvVar.HOME, "/")

    def path_directories(self) -> List[str]:
        """
        PATH split into its directories, skipping empty entries.

        Relative entries are resolved against the shell's working
        directory, not the process's.
        """
        return [
            d if os.path.isabs(d) else os.path.normpath(os.path.join(self.cwd, d))
            for d in self.get(EnvVar.PATH).split(':') if d
        ]
