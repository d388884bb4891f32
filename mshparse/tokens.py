"""Splitting an input line into word and pipe tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["TokenKind", "Token", "tokenize"]

_QUOTES = "'\""


class TokenKind(enum.Enum):
    """The two kinds of token the lexer produces."""

    WORD = "word_tokin"
    PIPE = "pipe_token"


@dataclass
class Token:
    """A piece of an input line: a word or a pipe."""

    data: str
    kind: TokenKind


def _scan_word(line: str, pos: int) -> int:
    """Return the index where the word starting at ``pos`` ends.

    A word runs up to the first pipe that is not inside quotes.
    """
    quote: str | None = None
    end = len(line)
    while pos < end:
        char = line[pos]
        if char in _QUOTES:
            if quote is None:
                quote = char
            elif quote == char:
                quote = None
        elif quote is None and char == "|":
            break
        pos += 1
    return pos


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into word tokens separated by unquoted pipes.

    Leading spaces of a word are dropped; everything else, trailing
    spaces and quotes included, stays in the word.
    """
    tokens: list[Token] = []
    pos = 0
    end = len(line)
    while pos < end:
        while pos < end and line[pos] == " ":
            pos += 1
        start = pos
        pos = _scan_word(line, pos)
        if start < pos:
            tokens.append(Token(line[start:pos], TokenKind.WORD))
        if pos < end and line[pos] == "|":
            tokens.append(Token("|", TokenKind.PIPE))
            pos += 1
    return tokens