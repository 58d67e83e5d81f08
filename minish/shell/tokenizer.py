"""
Command Line Tokenizer

Splits a raw input line into shell words, honoring single quotes,
double quotes and backslash escapes.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto
from typing import List

from minish.exceptions import UnterminatedQuoteError


class QuoteState(Enum):
    """Quoting context of the character being read."""
    NORMAL = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()


# Characters a backslash may escape inside double quotes
DOUBLE_QUOTE_ESCAPABLE = frozenset('\\$"')


class Tokenizer:
    """
    Character-level tokenizer for shell input.

    The line is read left to right by a small state machine with three
    quote states and a one-shot escaping flag:

    - NORMAL: whitespace separates words, a backslash escapes any next
      character, quotes open a quoted section.
    - SINGLE_QUOTE: everything is literal until the closing quote.
    - DOUBLE_QUOTE: everything is literal until the closing quote, except
      that a backslash escapes a following backslash, dollar or double
      quote.

    Quoted sections glue onto the surrounding word, so ``a'b c'd`` is the
    single word ``ab cd``.

    Example:
        >>> Tokenizer().tokenize("echo 'hello   world' \\\"x\\\"")
        ['echo', 'hello   world', '"x"']
    """

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Raise UnterminatedQuoteError when a quote is still
                open at the end of the line instead of accepting the
                words read so far.
        """
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def tokenize(self, line: str) -> List[str]:
        """
        Split a line into words.

        Args:
            line: Raw input line

        Returns:
            The words in order; empty for a blank line

        Raises:
            UnterminatedQuoteError: In strict mode, if a quote is left open
        """
        tokens: List[str] = []
        current: List[str] = []
        state = QuoteState.NORMAL
        escaping = False

        for i, char in enumerate(line):
            if escaping:
                current.append(char)
                escaping = False
                continue

            if state is QuoteState.SINGLE_QUOTE:
                if char == "'":
                    state = QuoteState.NORMAL
                else:
                    current.append(char)
                continue

            if state is QuoteState.DOUBLE_QUOTE:
                if char == '"':
                    state = QuoteState.NORMAL
                elif char == '\\' and line[i + 1:i + 2] in DOUBLE_QUOTE_ESCAPABLE:
                    escaping = True
                else:
                    current.append(char)
                continue

            # NORMAL
            if char == '\\':
                escaping = True
            elif char == "'":
                state = QuoteState.SINGLE_QUOTE
            elif char == '"':
                state = QuoteState.DOUBLE_QUOTE
            elif char.isspace():
                if current:
                    tokens.append(''.join(current))
                    current = []
            else:
                current.append(char)

        if self._strict and state is not QuoteState.NORMAL:
            quote = "'" if state is QuoteState.SINGLE_QUOTE else '"'
            raise UnterminatedQuoteError(quote, context={'line': line})

        if current:
            tokens.append(''.join(current))

        return tokens


def tokenize(line: str) -> List[str]:
    """Split a line into words using a lenient Tokenizer."""
    return Tokenizer().tokenize(line)
