"""Token kinds, tokens and the syntax error raised while reading a command line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of lexical tokens and tree nodes, in their fixed numeric order."""

    WORD = 0
    SINGLE_QUOTE = 1
    DOUBLE_QUOTE = 2
    REDIRECT_IN = 3
    REDIRECT_OUT = 4
    APPEND_OUT = 5
    HEREDOC = 6
    PIPE = 7
    AND_IF = 8
    OR_IF = 9
    LEFT_PAREN = 10
    RIGHT_PAREN = 11
    VARIABLE = 12
    GROUP = 13
    CMD = 14
    REDIR = 15


@dataclass(frozen=True)
class Token:
    """A piece of a command line together with its kind."""

    value: str
    type: TokenType


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be read or is malformed."""


def describe_token_type(token_type: int | TokenType) -> str:
    """Return the printable name of a lexical token kind, or ``"UNKNOWN"``.

    Only the kinds the lexer produces (``WORD`` through ``VARIABLE``) have a
    description; tree node kinds and unknown numbers give ``"UNKNOWN"``.
    """
    try:
        member = TokenType(token_type)
    except ValueError:
        return "UNKNOWN"
    if member <= TokenType.VARIABLE:
        return member.name
    return "UNKNOWN"