"""Interactive loop: read lines, check, expand, parse and show the result."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence

from .debug import format_commands
from .environment import Environment, parse_environ
from .expand import expand_tokens, process_quotes_for_commands
from .parser import parse
from .syntax import ShellSyntaxError, check_pipes, check_quotes, check_redirections
from .tokens import tokenize

__all__ = ["process_line", "main"]

PROMPT = "minishell $> "
TOKENS_HEADER = "--- TOKENS ---"
EMPTY_WARNING = "Warning: Command list is empty after parsing!"


def process_line(line: str, env: Environment, exit_status: int = 0) -> str:
    """Check and parse ``line``, returning the report to print.

    Raises ShellSyntaxError when the line has unclosed quotes, a
    misplaced pipe or a redirection without a file name.
    """
    check_quotes(line)
    tokens = tokenize(line)
    if not tokens:
        return ""
    check_pipes(tokens)
    check_redirections(tokens)
    out = [f"{TOKENS_HEADER}\n"]
    commands = parse(expand_tokens(tokens, env, exit_status))
    if not commands:
        out.append(f"{EMPTY_WARNING}\n")
    else:
        out.append(format_commands(process_quotes_for_commands(commands, True)))
    return "".join(out)


def _read_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the read-parse-print loop until end of input."""
    try:
        import readline  # noqa: F401  (enables line editing and history)
    except ImportError:
        pass
    env = parse_environ(f"{key}={value}" for key, value in os.environ.items())
    exit_status = 0
    for line in _read_lines(PROMPT):
        try:
            report = process_line(line, env, exit_status)
        except ShellSyntaxError as exc:
            print(exc, file=sys.stderr)
            continue
        sys.stdout.write(report)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())