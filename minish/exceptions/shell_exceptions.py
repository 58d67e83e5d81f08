"""
Shell Exceptions

Exceptions raised while reading, parsing and dispatching a command line.
None of these terminate the shell loop: they abort the current line and
the prompt resumes. The only way out of the loop is ShellExit.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all shell errors.

    This is the parent class for every error the dispatch loop knows how
    to report. It carries a message meant for the user and a numeric code
    meant for programs and logs.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise ShellException("Something went wrong", error_code=1000)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class ShellSyntaxError(ShellException):
    """
    The command line is not well formed.

    Raised by the tokenizer and the redirection parser. The current line
    is abandoned.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or 1100,
            context=context
        )


class RedirectionSyntaxError(ShellSyntaxError):
    """
    A redirection operator is not followed by a filename.

    Example:
        >>> raise RedirectionSyntaxError(">")
    """

    def __init__(
        self,
        operator: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["operator"] = operator
        super().__init__(
            message=f"syntax error: expected file after '{operator}'",
            error_code=1101,
            context=ctx
        )
        self.operator = operator


class UnterminatedQuoteError(ShellSyntaxError):
    """
    A quoted section was still open at the end of the line.

    Only raised by a tokenizer running in strict mode.
    """

    def __init__(
        self,
        quote: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"syntax error: unterminated quote {quote}",
            error_code=1102,
            context=context
        )
        self.quote = quote


class ShellIOError(ShellException):
    """
    Base class for I/O failures on files the shell opens itself.

    Attributes:
        path: File path associated with the error
        reason: Operating system error text
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        reason: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(
            message=message,
            error_code=error_code or 1200,
            context=ctx
        )
        self.path = path
        self.reason = reason


class RedirectionIOError(ShellIOError):
    """
    A redirection target could not be opened or written.

    Example:
        >>> raise RedirectionIOError("/root/out.txt", "Permission denied")
    """

    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Error writing to file {path}: {reason}",
            path=path,
            reason=reason,
            error_code=1201,
            context=context
        )


class ConfigError(ShellException):
    """Raised when configuration loading or validation fails."""

    def __init__(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=1300,
            context=context
        )


class ShellExit(Exception):
    """
    Request to leave the shell with an exit status.

    Raised by the exit builtin. This is control flow, not an error, so it
    does not derive from ShellException and is never reported.

    Attributes:
        code: Exit status for the process
    """

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code
