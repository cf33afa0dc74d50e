"""A small interactive shell front end: tokenizer, syntax checks, string helpers and prompt loop."""

__version__ = "0.1.0"
__all__ = ["lexer", "shell", "syntax", "textutil", "tokens"]