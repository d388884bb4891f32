"""Turning word tokens into commands with arguments and redirections."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

from .tokens import Token, TokenKind

__all__ = [
    "RedirType",
    "Redirection",
    "Command",
    "split_quoted",
    "extract_command",
    "extract_redirections",
    "parse_redirections",
    "build_command",
    "parse",
]

_QUOTES = "'\""
_REDIRECTS = "<>"


class RedirType(enum.IntEnum):
    """Kinds of redirection, numbered as the shell reports them."""

    IN = 0
    OUT = 1
    APPEND = 2
    HEREDOC = 3


_OPERATORS = {
    "<": RedirType.IN,
    ">": RedirType.OUT,
    ">>": RedirType.APPEND,
    "<<": RedirType.HEREDOC,
}


@dataclass(frozen=True)
class Redirection:
    """One redirection: its kind and the file name or heredoc delimiter."""

    kind: RedirType
    file: str


@dataclass
class Command:
    """One command of a pipeline."""

    cmd: str | None
    args: list[str] = field(default_factory=list)
    redirs: list[Redirection] = field(default_factory=list)
    pipe_out: bool = False


def _toggle_quote(quote: str | None, char: str) -> str | None:
    """Return the quote state after reading ``char``."""
    if char in _QUOTES:
        if quote is None:
            return char
        if quote == char:
            return None
    return quote


def split_quoted(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` outside quotes, dropping empty pieces.

    Quote characters stay in the pieces.
    """
    pieces: list[str] = []
    current: list[str] = []
    quote: str | None = None
    for char in text:
        quote = _toggle_quote(quote, char)
        if char == sep and quote is None:
            if current:
                pieces.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        pieces.append("".join(current))
    return pieces


def _skip_leading_redirections(segment: str) -> int:
    """Return the index past the spaces and redirections that start ``segment``."""
    pos = 0
    end = len(segment)
    while pos < end:
        char = segment[pos]
        if char in _REDIRECTS:
            pos += 1
            while pos < end and segment[pos] == " ":
                pos += 1
            while pos < end and segment[pos] not in " <>":
                pos += 1
        elif char == " ":
            pos += 1
        else:
            break
    return pos


def _find_redirect(segment: str, pos: int) -> int:
    """Return the index of the next ``<`` or ``>`` from ``pos``, or -1."""
    for index in range(pos, len(segment)):
        if segment[index] in _REDIRECTS:
            return index
    return -1


def extract_command(segment: str) -> str:
    """Return the command text: after leading redirections, up to the next one."""
    start = _skip_leading_redirections(segment)
    stop = _find_redirect(segment, start)
    return segment[start:] if stop < 0 else segment[start:stop]


def _read_redirection(segment: str, start: int) -> tuple[str, int]:
    """Read the redirection operator at ``start`` with its target.

    Returns the text read and the index just past it.
    """
    end = len(segment)
    pos = start + 1
    if pos < end and segment[pos] == segment[start]:
        pos += 1
    while pos < end and segment[pos] == " ":
        pos += 1
    quote: str | None = None
    while pos < end:
        char = segment[pos]
        quote = _toggle_quote(quote, char)
        if quote is None and char in " <>":
            break
        pos += 1
    return segment[start:pos], pos


def extract_redirections(segment: str) -> str:
    """Return every redirection in ``segment``, joined with single spaces."""
    parts: list[str] = []
    pos = 0
    while (pos := _find_redirect(segment, pos)) >= 0:
        part, pos = _read_redirection(segment, pos)
        parts.append(part)
    return " ".join(parts)


def parse_redirections(segment: str) -> list[Redirection]:
    """Return the redirections of ``segment`` in order.

    Only an operator standing as a word of its own, followed by a word
    that is not an operator, makes a redirection.
    """
    words = split_quoted(extract_redirections(segment), " ")
    redirs: list[Redirection] = []
    pos = 0
    while pos < len(words):
        kind = _OPERATORS.get(words[pos])
        if (
            kind is not None
            and pos + 1 < len(words)
            and words[pos + 1] not in _OPERATORS
        ):
            redirs.append(Redirection(kind, words[pos + 1]))
            pos += 2
        else:
            pos += 1
    return redirs


def build_command(segment: str, pipe_out: bool) -> Command:
    """Build a Command from one pipeline segment."""
    args = split_quoted(extract_command(segment), " ")
    return Command(
        cmd=args[0] if args else None,
        args=args,
        redirs=parse_redirections(segment),
        pipe_out=bool(pipe_out),
    )


def parse(tokens: Sequence[Token]) -> list[Command]:
    """Build one Command for each word token of ``tokens``."""
    tokens = list(tokens)
    commands: list[Command] = []
    for token, following in zip(tokens, [*tokens[1:], None]):
        if token.kind is TokenKind.WORD:
            pipe_out = following is not None and following.kind is TokenKind.PIPE
            commands.append(build_command(token.data, pipe_out))
    return commands