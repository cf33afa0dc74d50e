"""The interactive prompt: read lines, split them into tokens and print them."""

from __future__ import annotations

import signal
import sys
from collections.abc import Callable
from typing import TextIO

from .lexer import tokenize
from .tokens import ShellSyntaxError, describe_token_type

PROMPT = "MiniShell-$ "
EXIT_MESSAGE = "\033[1A\033[2KMiniShell-$ exit"


def render_tokens(line: str) -> list[str]:
    """Return one ``"value => KIND"`` line per token of ``line``.

    Raises :class:`ShellSyntaxError` when the line cannot be tokenized.
    """
    return [f"{token.value} => {describe_token_type(token.type)}" for token in tokenize(line)]


def prompt(read_line: Callable[[str], str | None], out: TextIO) -> None:
    """Run the read–tokenize–print loop until ``read_line`` returns ``None``.

    An interrupt while reading starts a fresh line; syntax errors are
    reported and the loop goes on.
    """
    while True:
        try:
            line = read_line(PROMPT)
        except KeyboardInterrupt:
            out.write("\n")
            continue
        if line is None:
            out.write(EXIT_MESSAGE)
            out.flush()
            break
        if not line:
            continue
        try:
            rendered = render_tokens(line)
        except ShellSyntaxError as exc:
            out.write(f"{exc}\n")
            continue
        for text in rendered:
            out.write(f"{text}\n")


def _read_line(text: str) -> str | None:
    try:
        import readline  # noqa: F401  (enables line editing and history for input())
    except ImportError:
        pass
    try:
        return input(text)
    except EOFError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Start the prompt when given no arguments; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        return 0
    sigquit = getattr(signal, "SIGQUIT", None)
    previous = signal.signal(sigquit, signal.SIG_IGN) if sigquit is not None else None
    try:
        prompt(_read_line, sys.stdout)
    finally:
        if sigquit is not None:
            signal.signal(sigquit, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())