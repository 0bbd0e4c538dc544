"""Splitting a pattern string into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["RegexSyntaxError", "Token", "TokenKind", "tokenize"]


class RegexSyntaxError(ValueError):
    """Raised when a pattern cannot be tokenized or parsed."""


class TokenKind(Enum):
    """The kinds of token a pattern is made of."""

    LITERAL = ""
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_CURLY = "{"
    CLOSE_CURLY = "}"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    PIPE = "|"
    STAR = "*"
    PLUS = "+"
    QUESTION = "?"
    HYPHEN = "-"
    BACKSLASH = "\\"
    COMMA = ","
    PERCENT = "%"
    DOT = "."
    AT = "@"

    @property
    def label(self) -> str:
        """The kind's name in camel case, such as ``OpenParen``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


_PUNCTUATION = {kind.value: kind for kind in TokenKind if kind is not TokenKind.LITERAL}


@dataclass(frozen=True)
class Token:
    """One token of a pattern: its kind and the character it came from."""

    kind: TokenKind
    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"expected a single character, got {self.char!r}")
        if self.kind is not TokenKind.LITERAL and self.kind.value != self.char:
            raise ValueError(f"{self.kind.label} token cannot hold {self.char!r}")
        if self.kind is TokenKind.LITERAL and self.char in _PUNCTUATION:
            raise ValueError(f"{self.char!r} is not a literal character")

    def as_char(self) -> str:
        """The character this token stands for."""
        return self.char

    def __str__(self) -> str:
        if self.kind is TokenKind.LITERAL:
            return f"Literal({self.char!r})"
        return self.kind.label


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens; raise RegexSyntaxError if it is empty."""
    if not text:
        raise RegexSyntaxError("Empty input not allowed")
    return [Token(_PUNCTUATION.get(c, TokenKind.LITERAL), c) for c in text]