"""
minish Exception Hierarchy

All errors the shell reports derive from ShellException, so the dispatch
loop can catch them in one place and keep running.

Architecture:
    ShellException (Base)
    ├── ShellSyntaxError
    │   ├── RedirectionSyntaxError
    │   └── UnterminatedQuoteError
    ├── ShellIOError
    │   └── RedirectionIOError
    ├── ProcessException
    │   └── ExecError
    └── ConfigError

    ShellExit (control flow, raised by the exit builtin)
"""

from .shell_exceptions import (
    ShellException,
    ShellSyntaxError,
    RedirectionSyntaxError,
    UnterminatedQuoteError,
    ShellIOError,
    RedirectionIOError,
    ConfigError,
    ShellExit,
)

from .process_exceptions import (
    ProcessException,
    ExecError,
)

__all__ = [
    # Shell exceptions
    "ShellException",
    "ShellSyntaxError",
    "RedirectionSyntaxError",
    "UnterminatedQuoteError",
    "ShellIOError",
    "RedirectionIOError",
    "ConfigError",
    "ShellExit",
    # Process exceptions
    "ProcessException",
    "ExecError",
]
