# mshparse

mshparse is the front end of a small interactive shell. It reads a command
line and turns it into a list of pipeline commands, each with its name,
arguments and redirections. The result is printed as a report.

## What it does

- `mshparse.tokens.tokenize` splits a line into `Token`s. Each token is a word
  or a `|` pipe (`TokenKind.WORD`, `TokenKind.PIPE`). A pipe inside quotes
  stays part of the word.
- `mshparse.syntax` checks a line before it is parsed. Each check raises
  `ShellSyntaxError`, a subclass of `ValueError`:
  - `check_quotes(line)` rejects a line with an unclosed quote.
  - `check_pipes(tokens)` rejects a pipe at the start, at the end, or next to
    another pipe.
  - `check_redirections(tokens)` and `check_invalid_filename(word)` reject a
    `<`, `>`, `>>` or `<<` that has no file name after it.
  - `count_redirections(word)` counts the redirection operators in a word.
- `mshparse.environment.parse_environ` turns `NAME=value` strings into an
  ordered list of `(key, value)` pairs. `lookup_variable(name, env)` returns
  the value of a variable, or `""` when it is not set. `split_nonempty(text,
  sep)` is the plain splitter the environment parsing uses.
- `mshparse.expand.expand_tokens` and `expand_word` expand `$NAME` and `$?`.
  Nothing inside single quotes is expanded, and quotes are kept. An unknown
  variable, or a `$` with no name after it, expands to nothing.
  `is_valid_var_char` tells which characters a variable name may contain.
- `mshparse.parser.parse` builds one `Command` for each word token. A
  `Command` holds `cmd`, `args`, `redirs` (a list of `Redirection`) and
  `pipe_out`. The lower-level helpers are also public: `split_quoted`,
  `extract_command`, `extract_redirections`, `parse_redirections` and
  `build_command`.
- `mshparse.expand.remove_quotes` and `process_quotes_for_commands` strip
  quote characters from command names, arguments and file names. They return
  new values and leave their input unchanged.
- `mshparse.debug` formats tokens (`format_tokens`), environments
  (`format_env`) and commands (`format_commands`) as readable text.

## Installation

```
pip install .
```

Python 3.10 or later is needed. The package has no runtime dependencies.

## Interactive use

```
mshparse
```

This shows the prompt `minishell $> `. Each line you enter is checked, expanded
and parsed, and the report for the resulting commands is printed. Variables
come from the process environment. Syntax errors go to standard error and the
loop carries on. End the session with end-of-file (Ctrl-D). Line editing and
history are available where Python's `readline` module is.

## Library use

```python
from mshparse.tokens import tokenize
from mshparse.syntax import check_quotes, check_pipes, check_redirections
from mshparse.environment import parse_environ
from mshparse.expand import expand_tokens, process_quotes_for_commands
from mshparse.parser import parse
from mshparse.debug import format_commands

line = 'echo "hello $USER" > out.txt | wc -l'
env = parse_environ(["USER=alice", "HOME=/home/alice"])

check_quotes(line)            # raises ShellSyntaxError on an unclosed quote
tokens = tokenize(line)
check_pipes(tokens)           # raises ShellSyntaxError on a misplaced pipe
check_redirections(tokens)    # raises ShellSyntaxError on a missing file name

tokens = expand_tokens(tokens, env, 0)
commands = process_quotes_for_commands(parse(tokens), True)

print(format_commands(commands))
```

`mshparse.cli.process_line(line, env, exit_status)` runs all of these steps on
one line and returns the report as a string. It returns `""` for a blank line
and raises `ShellSyntaxError` on a syntax error.

### Redirections

`RedirType` in `mshparse.parser` numbers the redirections as follows:

| value | operator |
|-------|----------|
| 0     | `<`      |
| 1     | `>`      |
| 2     | `>>`     |
| 3     | `<<`     |

A redirection is recorded only when a space separates the operator from its
file name (`> out.txt`, not `>out.txt`). The command's arguments are the text
after any leading redirections, up to the next `<` or `>`.

## What it does not do

mshparse only parses. It does not run commands, open files for redirections,
read heredocs or set up pipes. It has no built-in commands. In the interactive
loop `$?` always expands to `0`, because nothing is ever run.

## Running the tests

```
pip install .[test]
pytest
```