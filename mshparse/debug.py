"""Human-readable dumps of tokens, environments and parsed commands."""

from __future__ import annotations

from collections.abc import Iterable

from .environment import Environment
from .parser import Command
from .tokens import Token

__all__ = ["format_tokens", "format_env", "format_commands"]

REDIR_LEGEND = "0:<, 1:>, 2:>>, 3:<< "


def _show(value: str | None) -> str:
    return "(null)" if value is None else value


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return one numbered line for each token, showing its text and kind."""
    return "".join(
        f"Token {index}: DATA=[{token.data}], TYPE=[{token.kind.value}]\n"
        for index, token in enumerate(tokens)
    )


def format_env(env: Environment) -> str:
    """Return ``key=value`` lines for every entry that has both parts."""
    return "".join(
        f"{key}={value}\n"
        for key, value in env
        if key is not None and value is not None
    )


def _format_command(command: Command) -> str:
    lines = [f"command name : {_show(command.cmd)}"]
    lines.extend(f"command args : {arg}" for arg in command.args)
    if command.redirs:
        lines.append("redir list")
        lines.append(REDIR_LEGEND)
        for redir in command.redirs:
            lines.append(f"type of redir : {int(redir.kind)}")
            lines.append(f"file name : {redir.file}")
    lines.append(f"is there any pipe ? : {int(command.pipe_out)}")
    lines.append("")
    return "".join(f"{line}\n" for line in lines)


def format_commands(commands: Iterable[Command]) -> str:
    """Return a block describing each command, followed by a blank line."""
    return "".join(_format_command(command) for command in commands)