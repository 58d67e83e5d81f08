"""
Process Exceptions

Exceptions related to launching external commands.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ProcessException(ShellException):
    """
    Base exception for all process-related errors.

    Attributes:
        message: Human-readable error description
        command: Command name associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(
            message=message,
            error_code=error_code or 2000,
            context=ctx
        )
        self.command = command


class ExecError(ProcessException):
    """
    Error while starting an external command.

    This exception is raised when a command was found on the search path
    but the operating system refused to start it. Common causes include:
    - Permission denied
    - Invalid executable format
    - Missing interpreter

    Example:
        >>> raise ExecError("ls", "/bin/ls", "Exec format error")
    """

    def __init__(
        self,
        command: str,
        path: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=f"{command}: {reason}",
            command=command,
            error_code=2006,
            context=ctx
        )
        self.path = path
        self.reason = reason
