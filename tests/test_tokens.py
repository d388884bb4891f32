import pytest

from mshparse.tokens import Token, TokenKind, tokenize


def test_token_kinds_carry_token_names():
    tokens = tokenize("ls|wc")
    assert [t.kind.value for t in tokens] == ["word_tokin", "pipe_token", "word_tokin"]


def test_empty_line_gives_no_tokens():
    assert tokenize("") == []


def test_only_spaces_gives_no_tokens():
    assert tokenize("     ") == []


def test_word_pipe_word_keeps_all_text():
    line = "ls -l |wc"
    tokens = tokenize(line)
    assert [t.kind for t in tokens] == [TokenKind.WORD, TokenKind.PIPE, TokenKind.WORD]
    assert "".join(t.data for t in tokens) == line


def test_word_keeps_trailing_spaces_and_drops_leading_ones():
    line = "ls -l | wc"
    tokens = tokenize(line)
    assert tokens[0].data == line[: line.index("|")]
    assert tokens[2].data == "wc"


def test_leading_spaces_are_skipped():
    assert tokenize("   cat") == [Token("cat", TokenKind.WORD)]


def test_quoted_pipes_stay_in_word():
    line = "echo 'a|b' \"c|d\""
    assert tokenize(line) == [Token(line, TokenKind.WORD)]


def test_other_quote_inside_quotes_does_not_close():
    line = 'echo "it\'s|x"'
    assert tokenize(line) == [Token(line, TokenKind.WORD)]


def test_unclosed_quote_swallows_rest_of_line():
    line = "echo 'a|b"
    assert tokenize(line) == [Token(line, TokenKind.WORD)]


def test_lone_pipe():
    assert tokenize("|") == [Token("|", TokenKind.PIPE)]


def test_double_pipe_gives_two_pipe_tokens():
    assert [t.kind for t in tokenize("||")] == [TokenKind.PIPE, TokenKind.PIPE]


@pytest.mark.parametrize(
    "line",
    ["a|b|c", "cat file | grep x | wc -l", "| x", "x |", "a||b"],
)
def test_pipe_count_matches_unquoted_pipes(line):
    tokens = tokenize(line)
    pipes = [t for t in tokens if t.kind is TokenKind.PIPE]
    assert len(pipes) == line.count("|")
    assert all(t.data == "|" for t in pipes)
    assert all(t.data.strip() for t in tokens if t.kind is TokenKind.WORD)