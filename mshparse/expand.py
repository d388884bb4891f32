"""Variable expansion and quote removal."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from .environment import Environment, lookup_variable
from .parser import Command
from .tokens import Token, TokenKind

__all__ = [
    "is_valid_var_char",
    "expand_word",
    "expand_tokens",
    "remove_quotes",
    "process_quotes_for_commands",
]

_QUOTES = "'\""
_STRIP_QUOTES = str.maketrans("", "", _QUOTES)


def is_valid_var_char(char: str) -> bool:
    """Return True if ``char`` may appear in a variable name."""
    return char == "_" or (char.isascii() and char.isalnum())


def expand_word(word: str, env: Environment, exit_status: int) -> str:
    """Expand ``$NAME`` and ``$?`` in ``word`` outside single quotes.

    Quotes are kept. An unknown variable, or a ``$`` with no name after
    it, expands to nothing.
    """
    out: list[str] = []
    quote: str | None = None
    pos = 0
    end = len(word)
    while pos < end:
        char = word[pos]
        if char in _QUOTES:
            if quote is None:
                quote = char
            elif quote == char:
                quote = None
            out.append(char)
            pos += 1
        elif char == "$" and quote != "'":
            pos += 1
            if pos < end and word[pos] == "?":
                out.append(str(exit_status))
                pos += 1
            else:
                start = pos
                while pos < end and is_valid_var_char(word[pos]):
                    pos += 1
                out.append(lookup_variable(word[start:pos], env))
        else:
            out.append(char)
            pos += 1
    return "".join(out)


def expand_tokens(
    tokens: Sequence[Token], env: Environment, exit_status: int
) -> list[Token]:
    """Return ``tokens`` with every word token expanded."""
    return [
        replace(token, data=expand_word(token.data, env, exit_status))
        if token.kind is TokenKind.WORD
        else token
        for token in tokens
    ]


def remove_quotes(text: str, remove: bool) -> str:
    """Return ``text`` without its quote characters if ``remove`` is true."""
    return text.translate(_STRIP_QUOTES) if remove else text


def process_quotes_for_commands(
    commands: Sequence[Command], remove: bool
) -> list[Command]:
    """Return ``commands`` with quotes removed from names, arguments and files."""
    return [
        replace(
            command,
            cmd=None if command.cmd is None else remove_quotes(command.cmd, remove),
            args=[remove_quotes(arg, remove) for arg in command.args],
            redirs=[
                replace(redir, file=remove_quotes(redir.file, remove))
                for redir in command.redirs
            ],
        )
        for command in commands
    ]