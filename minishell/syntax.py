"""Checking a token sequence for misplaced operators."""

from __future__ import annotations

from collections.abc import Iterable

from .tokens import ShellSyntaxError, Token, TokenType

EMPTY_INPUT = "Minishell: syntax error (empty input)"
BAD_PIPE = "Minishell: syntax error near unexpected token `|'"
BAD_LOGICAL = "Minishell: syntax error near unexpected token `&&' or `||'"
BAD_REDIRECTION = "Minishell: syntax error near redirection"
EMPTY_PARENS = "Minishell: syntax error near empty `()'"

_CONNECTORS = frozenset({TokenType.PIPE, TokenType.AND_IF, TokenType.OR_IF})
_LOGICAL = frozenset({TokenType.AND_IF, TokenType.OR_IF})
_REDIRECTIONS = frozenset(
    {
        TokenType.REDIRECT_IN,
        TokenType.REDIRECT_OUT,
        TokenType.APPEND_OUT,
        TokenType.HEREDOC,
    }
)


def check_syntax(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens as a list, or raise :class:`ShellSyntaxError`.

    Pipes and logical operators need a token on both sides and may not be
    followed by another connector; redirections need a plain word after them;
    ``()`` may not be empty.
    """
    tokens = list(tokens)
    if not tokens:
        raise ShellSyntaxError(EMPTY_INPUT)
    for prev, token, nxt in zip([None, *tokens], tokens, [*tokens[1:], None]):
        dangling = prev is None or nxt is None or nxt.type in _CONNECTORS
        if token.type is TokenType.PIPE and dangling:
            raise ShellSyntaxError(BAD_PIPE)
        if token.type in _LOGICAL and dangling:
            raise ShellSyntaxError(BAD_LOGICAL)
        if token.type in _REDIRECTIONS and (nxt is None or nxt.type is not TokenType.WORD):
            raise ShellSyntaxError(BAD_REDIRECTION)
        if (
            token.type is TokenType.LEFT_PAREN
            and nxt is not None
            and nxt.type is TokenType.RIGHT_PAREN
        ):
            raise ShellSyntaxError(EMPTY_PARENS)
    return tokens