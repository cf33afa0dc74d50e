# minishell

A small interactive shell front end. It reads command lines at a
`MiniShell-$ ` prompt, breaks each line into tokens (words, quoted strings,
variables, redirections, pipes, `&&`, `||` and parentheses) and prints every
token together with its type.

## Installing

```
pip install .
```

## Running the shell

```
minishell
```

Type a command line and press Enter:

```
MiniShell-$ echo "hello $USER" > out.txt
echo => WORD
hello  => DOUBLE_QUOTE
USER => VARIABLE
> => REDIRECT_OUT
out.txt => WORD
```

If a line cannot be tokenized, the error message is printed instead and the
prompt comes back. Empty lines are ignored.

Ctrl-C starts a fresh line; Ctrl-\ is ignored. Ctrl-D (end of input) prints
`MiniShell-$ exit` and leaves the shell. Where Python's `readline` module is
available, line editing and history work at the prompt. Started with any
arguments, `minishell` exits at once without showing a prompt.

## What it does not do

The shell only tokenizes and prints. It does not run commands, expand
variables, perform redirections or pipes, or provide built-in commands such
as `cd`, `echo` or `exit`. The interactive prompt does not apply
`check_syntax`; that check is available from the library.

## Using it as a library

```python
from minishell.lexer import tokenize
from minishell.syntax import check_syntax
from minishell.tokens import ShellSyntaxError, describe_token_type

tokens = tokenize("cat < in.txt | grep foo && echo done")
for token in tokens:
    print(token.value, describe_token_type(token.type))

try:
    check_syntax(tokenize("ls | | wc"))
except ShellSyntaxError as error:
    print(error)  # Minishell: syntax error near unexpected token `|'
```

- `minishell.tokens` holds `TokenType` (an `IntEnum` of token and node kinds),
  the frozen `Token` dataclass (`value`, `type`), `ShellSyntaxError` (a
  `ValueError`) and `describe_token_type`, which names the kinds `WORD`
  through `VARIABLE` and gives `"UNKNOWN"` for anything else.
- `minishell.lexer.tokenize(text)` returns the list of `Token` objects for a
  line. It raises `ShellSyntaxError` for an unclosed single or double quote,
  an odd number of parentheses, a `;`, or an operator character (`<`, `>`,
  `|`, `&`) at the end of the line or not forming a known operator.
- `minishell.syntax.check_syntax(tokens)` returns the tokens as a list, or
  raises `ShellSyntaxError` for empty input, a pipe or `&&`/`||` at either
  end or followed by another of them, a redirection not followed by a plain
  word, and an empty `()`.
- `minishell.shell.render_tokens(line)` gives the `value => TYPE` lines the
  interactive shell prints; `minishell.shell.prompt(read_line, out)` runs the
  prompt loop with any line reader and output stream; `minishell.shell.main`
  is the command's entry point.
- `minishell.textutil` holds small string helpers: `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `strcmp` and `is_word_char`.

## Running the tests

```
pip install .[test]
pytest
```