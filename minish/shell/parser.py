"""
Command Parser Module

Turns a tokenized command line into a command name, its arguments and
the redirection to apply.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, List, Sequence, Tuple

from minish.exceptions import RedirectionSyntaxError
from .tokenizer import Tokenizer


class RedirectStream(Enum):
    """Which standard stream a redirection captures."""
    NONE = "none"
    STDOUT = "stdout"
    STDERR = "stderr"


# operator -> (stream, append)
REDIRECTION_OPERATORS: dict[str, Tuple[RedirectStream, bool]] = {
    '>': (RedirectStream.STDOUT, False),
    '1>': (RedirectStream.STDOUT, False),
    '2>': (RedirectStream.STDERR, False),
    '>>': (RedirectStream.STDOUT, True),
    '1>>': (RedirectStream.STDOUT, True),
    '2>>': (RedirectStream.STDERR, True),
}


@dataclass(frozen=True)
class RedirectionSpec:
    """
    The redirection requested on one command line.

    Attributes:
        target: File to write to, or None when nothing is redirected
        append: Append to the target instead of truncating it
        stream: Stream the target captures
    """
    target: Optional[str] = None
    append: bool = False
    stream: RedirectStream = RedirectStream.NONE

    @property
    def active(self) -> bool:
        return self.target is not None and self.stream is not RedirectStream.NONE

    @property
    def redirect_to_stderr(self) -> bool:
        return self.stream is RedirectStream.STDERR

    @property
    def mode(self) -> str:
        """File mode to open the target with."""
        return 'a' if self.append else 'w'

    def resolved(self, cwd: str) -> 'RedirectionSpec':
        """Return a copy whose target is absolute, relative to cwd."""
        if self.target is None or os.path.isabs(self.target):
            return self
        return replace(self, target=os.path.normpath(os.path.join(cwd, self.target)))


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)
    redirection: RedirectionSpec = field(default_factory=RedirectionSpec)


def parse_redirections(tokens: Sequence[str]) -> Tuple[List[str], RedirectionSpec]:
    """
    Split redirection operators out of a token list.

    Token 0 is the command name and is never read as an operator. Each
    operator consumes the token after it as its filename. When several
    operators appear, the last one replaces the earlier ones entirely.

    Args:
        tokens: Words of one command line

    Returns:
        (command tokens, redirection); the input is not modified

    Raises:
        RedirectionSyntaxError: If an operator has no filename after it
    """
    if not tokens:
        return [], RedirectionSpec()

    command_tokens = [tokens[0]]
    spec = RedirectionSpec()

    i = 1
    while i < len(tokens):
        token = tokens[i]
        operator = REDIRECTION_OPERATORS.get(token)

        if operator is None:
            command_tokens.append(token)
            i += 1
            continue

        if i + 1 >= len(tokens):
            raise RedirectionSyntaxError(token)

        stream, append = operator
        spec = RedirectionSpec(target=tokens[i + 1], append=append, stream=stream)
        i += 2

    return command_tokens, spec


class CommandParser:
    """
    Parses shell command lines.

    Handles:
    - Command and arguments
    - Quoted strings and escape sequences
    - Output redirections (>, 1>, 2>, >>, 1>>, 2>>)

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("echo 'a  b' > out.txt")
        >>> cmd.args, cmd.redirection.target
        (['a  b'], 'out.txt')
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self._tokenizer = tokenizer or Tokenizer()

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a command line.

        A blank line parses to the empty command, which the dispatcher
        reports as not found.

        Args:
            line: Command line string

        Returns:
            ParsedCommand
        """
        tokens = self._tokenizer.tokenize(line)
        command_tokens, redirection = parse_redirections(tokens)

        if not command_tokens:
            return ParsedCommand(command="", redirection=redirection)

        return ParsedCommand(
            command=command_tokens[0],
            args=command_tokens[1:],
            redirection=redirection,
        )
