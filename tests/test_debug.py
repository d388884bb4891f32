from mshparse.debug import REDIR_LEGEND, format_commands, format_env, format_tokens
from mshparse.environment import parse_environ
from mshparse.parser import Command, Redirection, RedirType
from mshparse.tokens import Token, TokenKind, tokenize


def test_format_tokens_lines():
    tokens = [
        Token("ls", TokenKind.WORD),
        Token("|", TokenKind.PIPE),
        Token("wc", TokenKind.WORD),
    ]
    assert format_tokens(tokens).splitlines() == [
        "Token 0: DATA=[ls], TYPE=[word_tokin]",
        "Token 1: DATA=[|], TYPE=[pipe_token]",
        "Token 2: DATA=[wc], TYPE=[word_tokin]",
    ]


def test_format_tokens_empty():
    assert format_tokens([]) == ""


def test_format_tokens_one_line_per_token():
    tokens = tokenize("a | b | c")
    assert len(format_tokens(tokens).splitlines()) == len(tokens)


def test_format_env_skips_incomplete_entries():
    env = [("A", "1"), ("B", None), (None, "x")]
    assert format_env(env) == "A=1\n"


def test_format_env_round_trip():
    entries = ["A=1", "B=2"]
    assert format_env(parse_environ(entries)).splitlines() == entries


def test_format_command_with_redirection():
    command = Command(
        cmd="ls",
        args=["ls", "-l"],
        redirs=[Redirection(RedirType.OUT, "out")],
        pipe_out=True,
    )
    assert format_commands([command]).splitlines() == [
        "command name : ls",
        "command args : ls",
        "command args : -l",
        "redir list",
        REDIR_LEGEND,
        "type of redir : 1",
        "file name : out",
        "is there any pipe ? : 1",
        "",
    ]


def test_format_command_without_redirections():
    command = Command(cmd="pwd", args=["pwd"])
    text = format_commands([command])
    assert "redir list" not in text
    assert text.endswith("is there any pipe ? : 0\n\n")


def test_format_command_without_name():
    command = Command(cmd=None, redirs=[Redirection(RedirType.IN, "f")])
    text = format_commands([command])
    assert text.startswith("command name : (null)\n")
    assert "command args" not in text


def test_format_commands_empty():
    assert format_commands([]) == ""