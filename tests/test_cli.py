import io
import sys

import pytest

from mshparse.cli import TOKENS_HEADER, main, process_line
from mshparse.syntax import UNCLOSED_QUOTE, UNEXPECTED_PIPE, ShellSyntaxError


def test_expands_variable_and_marks_pipe():
    out = process_line("echo $HOME | wc", [("HOME", "/home/u")], 0)
    lines = out.splitlines()
    assert lines[0] == TOKENS_HEADER
    assert "command args : /home/u" in lines
    assert "is there any pipe ? : 1" in lines
    assert "command name : wc" in lines


def test_exit_status_expansion():
    out = process_line("echo $?", [], 42)
    assert "command args : 42" in out.splitlines()


def test_quotes_are_removed_after_parsing():
    out = process_line("echo 'a b'", [], 0)
    assert "command args : a b" in out.splitlines()


def test_single_quotes_block_expansion():
    out = process_line("echo '$X'", [("X", "1")], 0)
    assert "command args : $X" in out.splitlines()


def test_redirections_are_reported():
    lines = process_line("cat < in > out", [], 0).splitlines()
    assert "type of redir : 0" in lines
    assert "file name : in" in lines
    assert "type of redir : 1" in lines
    assert "file name : out" in lines


def test_blank_line_gives_nothing():
    assert process_line("   ", [], 0) == ""


@pytest.mark.parametrize("line", ["| ls", "ls |", "ls | | wc"])
def test_pipe_errors(line):
    with pytest.raises(ShellSyntaxError) as info:
        process_line(line, [], 0)
    assert str(info.value) == UNEXPECTED_PIPE


def test_unclosed_quote():
    with pytest.raises(ShellSyntaxError) as info:
        process_line("echo 'abc", [], 0)
    assert str(info.value) == UNCLOSED_QUOTE


def test_missing_filename():
    with pytest.raises(ShellSyntaxError, match="newline"):
        process_line("cat <", [], 0)


def test_main_reads_until_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("echo $GREETING\n| x\n"))
    monkeypatch.setenv("GREETING", "hi")
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "command args : hi" in captured.out
    assert UNEXPECTED_PIPE in captured.err