"""Building the shell's variable list from process environment entries."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["Environment", "split_nonempty", "parse_environ", "lookup_variable"]

Environment = list[tuple["str | None", "str | None"]]


def split_nonempty(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def parse_environ(entries: Iterable[str]) -> Environment:
    """Turn ``NAME=value`` entries into an ordered list of (key, value) pairs.

    The key is the first non-empty piece between ``=`` signs and the
    value the second; either is None when missing.
    """
    env: Environment = []
    for entry in entries:
        pieces = split_nonempty(entry, "=")
        key = pieces[0] if pieces else None
        value = pieces[1] if len(pieces) > 1 else None
        env.append((key, value))
    return env


def lookup_variable(name: str, env: Environment) -> str:
    """Return the value of the first entry named ``name``, or an empty string."""
    for key, value in env:
        if key == name:
            return value if value is not None else ""
    return ""