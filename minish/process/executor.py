"""
External Command Executor

Runs commands that are not builtins: finds the executable on PATH,
describes how its standard streams are wired, and hands the request to
a spawner that starts the process and waits for it.

Author: YSNRFD
Version: 1.0.0
"""

import contextlib
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, List, Tuple, Sequence

from minish.core.state import ShellState
from minish.exceptions import ExecError, RedirectionIOError
from minish.filesystem.path_resolver import PathResolver, ResolvedCommand
from minish.logger import get_logger
from minish.shell.output import OutputRouter
from minish.shell.parser import RedirectionSpec, RedirectStream


class StreamMode(Enum):
    """How a child's output stream is connected."""
    INHERIT = auto()
    TRUNCATE = auto()
    APPEND = auto()


@dataclass(frozen=True)
class StreamTarget:
    """Destination of one output stream of a child process."""
    mode: StreamMode = StreamMode.INHERIT
    path: Optional[str] = None

    @classmethod
    def to_file(cls, path: str, append: bool) -> 'StreamTarget':
        return cls(StreamMode.APPEND if append else StreamMode.TRUNCATE, path)

    @property
    def file_mode(self) -> str:
        return 'a' if self.mode is StreamMode.APPEND else 'w'


@dataclass(frozen=True)
class SpawnRequest:
    """
    Everything needed to start one external command.

    Attributes:
        executable: Full path of the program to run
        argv: Argument vector; argv[0] is the command name as typed
        stdout: Where the child's stdout goes
        stderr: Where the child's stderr goes
        cwd: Working directory for the child
    """
    executable: str
    argv: Tuple[str, ...]
    stdout: StreamTarget = field(default_factory=StreamTarget)
    stderr: StreamTarget = field(default_factory=StreamTarget)
    cwd: Optional[str] = None


class Spawner(ABC):
    """Starts a process for a SpawnRequest and blocks until it exits."""

    @abstractmethod
    def spawn(self, request: SpawnRequest) -> int:
        """
        Run the request to completion.

        Returns:
            The child's exit status

        Raises:
            ExecError: If the process could not be started
        """


class SubprocessSpawner(Spawner):
    """Spawner backed by the subprocess module."""

    def spawn(self, request: SpawnRequest) -> int:
        with contextlib.ExitStack() as stack:
            stdout = self._open(stack, request.stdout)
            stderr = self._open(stack, request.stderr)
            try:
                completed = subprocess.run(
                    list(request.argv),
                    executable=request.executable,
                    cwd=request.cwd,
                    stdout=stdout,
                    stderr=stderr,
                )
            except OSError as e:
                raise ExecError(request.argv[0], request.executable, e.strerror or str(e))
        return completed.returncode

    @staticmethod
    def _open(stack: contextlib.ExitStack, target: StreamTarget):
        if target.mode is StreamMode.INHERIT:
            return None
        try:
            return stack.enter_context(open(target.path, target.file_mode + 'b'))
        except OSError as e:
            raise RedirectionIOError(target.path, e.strerror or str(e))


class ExternalExecutor:
    """
    Executes external commands.

    Example:
        >>> executor = ExternalExecutor()
        >>> executor.execute('ls', ['-l'], RedirectionSpec(), state)
        0
    """

    def __init__(
        self,
        spawner: Optional[Spawner] = None,
        router: Optional[OutputRouter] = None
    ):
        self._spawner = spawner or SubprocessSpawner()
        self._router = router or OutputRouter()
        self._logger = get_logger('executor')

    @property
    def spawner(self) -> Spawner:
        return self._spawner

    @staticmethod
    def build_request(
        resolved: ResolvedCommand,
        command: str,
        args: Sequence[str],
        redirection: RedirectionSpec,
        cwd: Optional[str] = None
    ) -> SpawnRequest:
        """
        Describe how to start a resolved command.

        Only the stream named by the redirection goes to the file; the
        other one is inherited from the shell.

        Args:
            resolved: Executable found on PATH
            command: Command name as typed
            args: Arguments after the command name
            redirection: Redirection for the current line
            cwd: Working directory for the child

        Returns:
            SpawnRequest for the spawner
        """
        stdout = StreamTarget()
        stderr = StreamTarget()

        if redirection.active:
            target = StreamTarget.to_file(redirection.target, redirection.append)
            if redirection.stream is RedirectStream.STDERR:
                stderr = target
            else:
                stdout = target

        argv: List[str] = [command, *args]
        return SpawnRequest(
            executable=resolved.path,
            argv=tuple(argv),
            stdout=stdout,
            stderr=stderr,
            cwd=cwd,
        )

    def execute(
        self,
        command: str,
        args: List[str],
        redirection: RedirectionSpec,
        state: ShellState
    ) -> Optional[int]:
        """
        Run an external command and wait for it.

        Args:
            command: Command name
            args: Command arguments
            redirection: Redirection for the current line
            state: Shell state (PATH and working directory)

        Returns:
            The child's exit status, or None if the command was not found

        Raises:
            ExecError: If the process could not be started
        """
        resolved = PathResolver.find_executable(command, state.path_directories())
        if resolved is None:
            self._logger.info("Command not found", context={'command': command})
            self._router.message(f"{command}: command not found")
            return None

        request = self.build_request(resolved, command, args, redirection, cwd=state.cwd)
        self._logger.info(
            f"Spawning {resolved.path}",
            context={'argv': list(request.argv)}
        )

        # Shell output written so far must reach the terminal before the child's
        self._router.stdout.flush()
        self._router.stderr.flush()

        status = self._spawner.spawn(request)
        self._logger.debug(f"{command} exited", context={'status': status})
        return status
