"""
Output Router

Decides where the text of a builtin goes: the terminal's stdout, the
terminal's stderr, or a redirection file.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from minish.exceptions import RedirectionIOError
from minish.logger import get_logger
from .builtins import CommandResult
from .parser import RedirectionSpec


class OutputRouter:
    """
    Routes command results to the terminal or to a redirection target.

    A redirection only captures the text of the stream it names: ``2>``
    never takes success text and ``>`` never takes an error. Text that is
    not captured goes to the terminal, on stderr when the line redirects
    stderr and on stdout otherwise.

    Streams default to the process's sys.stdout and sys.stderr, looked up
    at write time.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        self._stdout = stdout
        self._stderr = stderr
        self._logger = get_logger('output')

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def prepare(self, redirection: RedirectionSpec) -> None:
        """
        Open the redirection target once before the command runs.

        A ``>`` target is truncated and an ``>>`` target is created if
        missing, whether or not the command ends up writing to it.

        Args:
            redirection: Redirection with an absolute target

        Raises:
            RedirectionIOError: If the target cannot be opened
        """
        if not redirection.active:
            return

        try:
            with open(redirection.target, redirection.mode, encoding='utf-8'):
                pass
        except OSError as e:
            raise RedirectionIOError(redirection.target, e.strerror or str(e))

    def route(self, result: CommandResult, redirection: RedirectionSpec) -> None:
        """
        Emit a builtin's result.

        Args:
            result: The builtin's result
            redirection: Redirection for the current line
        """
        if result.ok and not result.output:
            return

        captured = redirection.active and (result.ok != redirection.redirect_to_stderr)

        if captured:
            try:
                self._write_file(redirection, result.output)
                return
            except RedirectionIOError as e:
                self._logger.error(e.message, context=e.context)
                self.error(e.message)

        stream = self.stderr if redirection.redirect_to_stderr else self.stdout
        stream.write(f"{result.output}\n")
        stream.flush()

    def message(self, text: str) -> None:
        """Write a line of shell output to the terminal's stdout."""
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def error(self, message: str) -> None:
        """Write a diagnostic line to the terminal's stderr."""
        self.stderr.write(f"{message}\n")
        self.stderr.flush()

    def _write_file(self, redirection: RedirectionSpec, text: str) -> None:
        try:
            with open(redirection.target, redirection.mode, encoding='utf-8') as f:
                f.write(f"{text}\n")
        except OSError as e:
            raise RedirectionIOError(redirection.target, e.strerror or str(e))
