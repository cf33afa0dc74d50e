"""Splitting a command line into tokens."""

from __future__ import annotations

from .tokens import ShellSyntaxError, Token, TokenType

_BLANKS = " \t"
_OPERATOR_CHARS = "<>|&"
_WORD_STOPS = frozenset(" \t;&()|<>$")

_OPERATORS = (
    (">>", TokenType.APPEND_OUT),
    ("<<", TokenType.HEREDOC),
    ("||", TokenType.OR_IF),
    ("&&", TokenType.AND_IF),
    ("|", TokenType.PIPE),
    ("<", TokenType.REDIRECT_IN),
    (">", TokenType.REDIRECT_OUT),
)

UNCLOSED_DOUBLE_QUOTE = "Minishell: syntax error unclosed Double Quote!"
UNCLOSED_SINGLE_QUOTE = "Minishell: syntax error unclosed Single Quote!"
UNEXPECTED_SEMICOLON = "Minishell: syntax error unexpected token `;'"
UNCLOSED_PAREN = "Minishell: syntax error unclosed Paren"


def _is_name_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char == "_"


class _Lexer:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.tokens: list[Token] = []
        self.parens = 0

    def _emit(self, value: str, kind: TokenType) -> None:
        self.tokens.append(Token(value, kind))

    def run(self) -> list[Token]:
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char in _BLANKS:
                self.pos += 1
            elif char in _OPERATOR_CHARS:
                self._operator()
            elif char == '"':
                self._double_quoted()
            elif char == "'":
                self._single_quoted()
            elif char == "(":
                self._paren("(", TokenType.LEFT_PAREN)
            elif char == ")":
                self._paren(")", TokenType.RIGHT_PAREN)
            elif char == "$":
                self._variable()
            else:
                self._word()
        if self.parens % 2:
            raise ShellSyntaxError(UNCLOSED_PAREN)
        return self.tokens

    def _operator(self) -> None:
        if self.pos + 1 < len(self.text):
            for symbol, kind in _OPERATORS:
                if self.text.startswith(symbol, self.pos):
                    self._emit(symbol, kind)
                    self.pos += len(symbol)
                    return
        char = self.text[self.pos]
        raise ShellSyntaxError(f"Minishell: syntax error near unexpected token `{char}'")

    def _double_quoted(self) -> None:
        text = self.text
        self.pos += 1
        start = self.pos
        while self.pos < len(text) and text[self.pos] != '"':
            if text[self.pos] != "$":
                self.pos += 1
                continue
            dollar = self.pos
            if dollar + 1 < len(text) and text[dollar + 1] == "?":
                name, name_end = "?", dollar + 2
            else:
                name_end = dollar + 1
                while name_end < len(text) and _is_name_char(text[name_end]):
                    name_end += 1
                name = text[dollar + 1 : name_end]
            if not name:
                # A dollar sign not followed by a name stays literal text.
                self.pos += 1
                continue
            if start < dollar:
                self._emit(text[start:dollar], TokenType.DOUBLE_QUOTE)
            self._emit(name, TokenType.VARIABLE)
            self.pos = start = name_end
        if self.pos >= len(text):
            raise ShellSyntaxError(UNCLOSED_DOUBLE_QUOTE)
        if start < self.pos:
            self._emit(text[start : self.pos], TokenType.DOUBLE_QUOTE)
        self.pos += 1

    def _single_quoted(self) -> None:
        start = self.pos + 1
        end = self.text.find("'", start)
        if end == -1:
            raise ShellSyntaxError(UNCLOSED_SINGLE_QUOTE)
        self._emit(self.text[start:end], TokenType.SINGLE_QUOTE)
        self.pos = end + 1

    def _paren(self, symbol: str, kind: TokenType) -> None:
        self._emit(symbol, kind)
        self.parens += 1
        self.pos += 1

    def _variable(self) -> None:
        start = self.pos + 1
        end = self.text.find(" ", start)
        if end == -1:
            end = len(self.text)
        self._emit(self.text[start:end], TokenType.VARIABLE)
        self.pos = end + 1

    def _word(self) -> None:
        text = self.text
        start = self.pos
        while self.pos < len(text) and text[self.pos] not in _WORD_STOPS:
            self.pos += 1
        if self.pos < len(text) and text[self.pos] == ";":
            raise ShellSyntaxError(UNEXPECTED_SEMICOLON)
        self._emit(text[start : self.pos], TokenType.WORD)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens.

    Raises :class:`ShellSyntaxError` for unclosed quotes, an odd number of
    parentheses, a ``;`` or a dangling or lone operator character.
    """
    return _Lexer(text).run()