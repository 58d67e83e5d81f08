"""
Shell Built-in Commands

Implements built-in shell commands. Builtins never print: each returns
a CommandResult and the output router decides where the text goes.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass
from typing import Callable, List

from minish.core.state import ShellState
from minish.exceptions import ShellExit
from minish.filesystem.path_resolver import PathResolver
from minish.logger import get_logger


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a builtin.

    Attributes:
        ok: Whether the command succeeded
        output: Text to show, without a trailing newline
    """
    ok: bool
    output: str = ""


BuiltinFunc = Callable[[List[str], ShellState], CommandResult]


class BuiltinCommands:
    """
    Built-in shell commands.

    These commands are executed directly by the shell without creating
    a new process. The table maps a command name to a callable taking
    the argument list and the shell state.
    """

    def __init__(self):
        self._logger = get_logger('builtins')
        self._commands: dict[str, BuiltinFunc] = {
            'exit': self.cmd_exit,
            'echo': self.cmd_echo,
            'pwd': self.cmd_pwd,
            'cd': self.cmd_cd,
            'type': self.cmd_type,
        }

    def get_commands(self) -> dict[str, BuiltinFunc]:
        """Get all built-in commands."""
        return self._commands

    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands

    def register(self, name: str, func: BuiltinFunc) -> None:
        """
        Add or replace a built-in command.

        Args:
            name: Command name
            func: Callable taking (args, state) and returning a CommandResult
        """
        self._commands[name] = func

    def execute(self, name: str, args: List[str], state: ShellState) -> CommandResult:
        """
        Execute a built-in command.

        Args:
            name: Command name
            args: Command arguments
            state: Shell state the command runs against

        Returns:
            The command's result

        Raises:
            ShellExit: From the exit builtin
        """
        cmd = self._commands.get(name)
        if cmd is None:
            return CommandResult(False, f"{name}: not a shell builtin")

        self._logger.debug(f"Running builtin {name}", context={'args': args})
        return cmd(args, state)

    # Command implementations

    def cmd_exit(self, args: List[str], state: ShellState) -> CommandResult:
        """Exit the shell with the given status (default 0)."""
        code = 0
        if args:
            try:
                code = int(args[0])
            except ValueError:
                code = 0
        raise ShellExit(code)

    def cmd_echo(self, args: List[str], state: ShellState) -> CommandResult:
        """Display arguments separated by single spaces."""
        return CommandResult(True, ' '.join(args))

    def cmd_pwd(self, args: List[str], state: ShellState) -> CommandResult:
        """Print working directory."""
        return CommandResult(True, state.cwd)

    def cmd_cd(self, args: List[str], state: ShellState) -> CommandResult:
        """Change directory; without an argument go to HOME."""
        path = args[0] if args else state.home
        display, target = PathResolver.resolve_cd_target(path, state)

        if not os.path.isdir(target):
            return CommandResult(False, f"cd: {display}: No such file or directory")

        state.cwd = os.path.realpath(target)
        self._logger.debug("Changed directory", context={'cwd': state.cwd})
        return CommandResult(True, "")

    def cmd_type(self, args: List[str], state: ShellState) -> CommandResult:
        """Describe how a command name would be interpreted."""
        name = args[0] if args else ""
        if not name:
            return CommandResult(True, "")

        if self.is_builtin(name):
            return CommandResult(True, f"{name} is a shell builtin")

        found = PathResolver.find_executable(name, state.path_directories())
        if found is not None:
            return CommandResult(True, f"{name} is {found.path}")

        return CommandResult(False, f"{name}: not found")
