"""
minish Shell Module

Provides the interactive command-line shell:
- Tokenizing with quotes and escapes
- Redirection parsing
- Built-in commands
- Output routing
"""

from .tokenizer import Tokenizer, QuoteState, tokenize
from .parser import (
    CommandParser,
    ParsedCommand,
    RedirectionSpec,
    RedirectStream,
    parse_redirections,
)
from .builtins import BuiltinCommands, CommandResult
from .output import OutputRouter
from .shell import Shell, create_shell

__all__ = [
    'Tokenizer',
    'QuoteState',
    'tokenize',
    'CommandParser',
    'ParsedCommand',
    'RedirectionSpec',
    'RedirectStream',
    'parse_redirections',
    'BuiltinCommands',
    'CommandResult',
    'OutputRouter',
    'Shell',
    'create_shell',
]
