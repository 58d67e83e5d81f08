"""
minish Shell Module

The interactive read-eval loop.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from .parser import CommandParser, ParsedCommand
from .builtins import BuiltinCommands
from .output import OutputRouter
from minish.core.config_loader import Config, get_config
from minish.core.state import ShellState
from minish.exceptions import ShellException, ShellExit
from minish.logger import get_logger
from minish.process.executor import ExternalExecutor, Spawner


class Shell:
    """
    minish Interactive Shell.

    Provides:
    - Command parsing (quoting, escaping)
    - Built-in commands
    - External commands found on PATH
    - Output and error redirection

    Lines are handled strictly one at a time: a line is parsed,
    dispatched and, for external commands, waited on before the next
    prompt is written.

    Example:
        >>> shell = Shell(ShellState.from_environment())
        >>> shell.run()
    """

    def __init__(
        self,
        state: ShellState,
        config: Optional[Config] = None,
        spawner: Optional[Spawner] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        self._state = state
        self._config = config or get_config()
        self._logger = get_logger('shell')
        self._parser = CommandParser()
        self._builtins = BuiltinCommands()
        self._router = OutputRouter(stdout=stdout, stderr=stderr)
        self._executor = ExternalExecutor(spawner=spawner, router=self._router)
        self._stdin = stdin
        self._running = False

    @property
    def state(self) -> ShellState:
        return self._state

    @property
    def builtins(self) -> BuiltinCommands:
        return self._builtins

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def prompt(self) -> str:
        return self._config.shell.prompt

    def run(self) -> int:
        """
        Run the interactive shell.

        This is the main REPL loop.

        Returns:
            Exit status requested by the exit builtin, or 0 at end of input
        """
        self._running = True
        stdin = self._stdin if self._stdin is not None else sys.stdin
        exit_code = 0

        while self._running:
            out = self._router.stdout
            out.write(self.prompt)
            out.flush()

            try:
                line = stdin.readline()
            except KeyboardInterrupt:
                out.write("\n")
                continue

            if not line:
                # End of input
                out.write("\n")
                out.flush()
                break

            try:
                self.execute_line(line.rstrip('\r\n'))
            except ShellExit as e:
                exit_code = e.code
                break
            except KeyboardInterrupt:
                out.write("\n")
            except Exception as e:
                self._logger.exception(f"Shell error: {e}", exc=e)
                self._router.error(f"minish: error: {e}")

        self._running = False
        self._logger.info("Shell loop finished", context={'exit_code': exit_code})
        return exit_code

    def execute_line(self, line: str) -> Optional[int]:
        """
        Execute one command line.

        Errors in the line are reported on stderr and do not propagate;
        only the exit builtin escapes, as ShellExit.

        Args:
            line: Command line string

        Returns:
            Exit status of an external command, or None
        """
        self._logger.debug("Executing line", context={'line': line})

        try:
            cmd = self._parser.parse(line)
            return self._execute_command(cmd)
        except ShellException as e:
            self._logger.warning(e.message, context=e.context)
            self._router.error(e.message)
            return None

    def _execute_command(self, cmd: ParsedCommand) -> Optional[int]:
        """
        Execute a parsed command.

        Redirection targets are resolved against the working directory
        the command starts in, and opened before it runs.
        """
        redirection = cmd.redirection.resolved(self._state.cwd)
        self._router.prepare(redirection)

        if self._builtins.is_builtin(cmd.command):
            result = self._builtins.execute(cmd.command, cmd.args, self._state)
            self._router.route(result, redirection)
            return None

        return self._executor.execute(cmd.command, cmd.args, redirection, self._state)

    def stop(self) -> None:
        """Stop the shell after the current line."""
        self._running = False

    def run_script(self, script: str) -> int:
        """
        Run a script (multiple commands).

        Args:
            script: Script content, one command per line; blank lines
                are skipped

        Returns:
            Status requested by exit, or 0 when the script runs out
        """
        for line in script.split('\n'):
            if not line.strip():
                continue
            try:
                self.execute_line(line)
            except ShellExit as e:
                return e.code

        return 0


def create_shell(state: Optional[ShellState] = None, **kwargs) -> Shell:
    """Factory function to create a shell."""
    return Shell(state or ShellState.from_environment(), **kwargs)
