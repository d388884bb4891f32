"""Syntax checks run on a line and its tokens before parsing."""

from __future__ import annotations

from collections.abc import Sequence

from .tokens import Token, TokenKind

__all__ = [
    "ShellSyntaxError",
    "check_quotes",
    "check_pipes",
    "count_redirections",
    "check_invalid_filename",
    "check_redirections",
]

UNCLOSED_QUOTE = "minishell: syntax error near unexpected token 'newline'"
UNEXPECTED_PIPE = "minishell:  syntax error near unexpected token `|'"
_TOKEN_MESSAGE = "minishell: syntax error near unexpected token `{}'"
_REDIRECTS = "<>"


class ShellSyntaxError(ValueError):
    """Raised when a line cannot be run because of a syntax error."""


def check_quotes(line: str) -> str:
    """Return ``line`` if every quote in it is closed; raise otherwise."""
    quote: str | None = None
    for char in line:
        if quote is None and char in "'\"":
            quote = char
        elif quote is not None and char == quote:
            quote = None
    if quote is not None:
        raise ShellSyntaxError(UNCLOSED_QUOTE)
    return line


def check_pipes(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return ``tokens`` if every pipe sits between two words; raise otherwise."""
    if tokens and tokens[0].kind is TokenKind.PIPE:
        raise ShellSyntaxError(UNEXPECTED_PIPE)
    followers = [*tokens[1:], None]
    for token, following in zip(tokens, followers):
        if token.kind is TokenKind.PIPE and (
            following is None or following.kind is not TokenKind.WORD
        ):
            raise ShellSyntaxError(UNEXPECTED_PIPE)
    return tokens


def count_redirections(word: str | None) -> int:
    """Count the redirection operators in ``word``.

    ``>>`` and ``<<`` count once each; the character right after a
    doubled operator is counted without being paired again.
    """
    if word is None or word == "|":
        return 0
    count = 0
    pos = 0
    end = len(word)
    while pos < end:
        if word.startswith((">>", "<<"), pos):
            count += 1
            pos += 2
            if pos >= end:
                break
        if word[pos] in _REDIRECTS:
            count += 1
        pos += 1
    return count


def _unexpected_token(word: str, pos: int) -> str:
    rest = word[pos:]
    if not rest:
        name = "newline"
    elif rest.startswith("|"):
        name = "|"
    elif rest.startswith(">>"):
        name = ">>"
    elif rest.startswith("<<"):
        name = "<<"
    else:
        name = rest[0]
    return _TOKEN_MESSAGE.format(name)


def check_invalid_filename(word: str | None) -> str | None:
    """Return ``word`` if every redirection in it is followed by a file name.

    Raises ShellSyntaxError naming the token found where the file name
    should have been.
    """
    if word is None or count_redirections(word) == 0:
        return word
    pos = 0
    end = len(word)
    while pos < end:
        while pos < end and word[pos] not in _REDIRECTS:
            pos += 1
        if pos >= end:
            break
        operator = word[pos]
        pos += 1
        if pos < end and word[pos] == operator:
            pos += 1
        while pos < end and word[pos] == " ":
            pos += 1
        if pos >= end or word[pos] in "<>|":
            raise ShellSyntaxError(_unexpected_token(word, pos))
        while pos < end and word[pos] not in " <>|":
            pos += 1
    return word


def check_redirections(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return ``tokens`` if the redirections of every word are well formed."""
    for token in tokens:
        if token.kind is TokenKind.WORD:
            check_invalid_filename(token.data)
    return tokens