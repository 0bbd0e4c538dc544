"""Turning a pattern string into a simplified regex tree."""

from __future__ import annotations

from functools import reduce
from string import digits

from rzozowski.lexer import RegexSyntaxError, Token, TokenKind, tokenize
from rzozowski.ranges import (
    CLASS_ESCAPE_CHARS,
    NON_CLASS_ESCAPE_CHARS,
    AtLeast,
    Between,
    CharRange,
    Count,
    Exact,
    Single,
    Span,
)
from rzozowski.regex import Class, Concat, Literal, Or, Regex, Repeat

__all__ = ["parse"]

_SPECIAL_SEQUENCES: dict[str, Regex] = {
    "d": Class((Span("0", "9"),)),
    "w": Class((Span("a", "z"), Span("A", "Z"), Span("0", "9"), Single("_"))),
}

_CLASS_CHAR_KINDS = frozenset(
    {TokenKind.LITERAL, TokenKind.PERCENT, TokenKind.PLUS, TokenKind.DOT, TokenKind.AT}
)

_SIMPLE_REPETITIONS: dict[TokenKind, Count] = {
    TokenKind.STAR: AtLeast(0),
    TokenKind.PLUS: AtLeast(1),
    TokenKind.QUESTION: Between(0, 1),
}


class _Parser:
    """A backtracking recursive-descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self._furthest = -1
        self._expected: list[str] = []

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _expect(self, description: str) -> None:
        if self.pos > self._furthest:
            self._furthest = self.pos
            self._expected = [description]
        elif self.pos == self._furthest and description not in self._expected:
            self._expected.append(description)

    def _accept(self, kind: TokenKind) -> Token | None:
        token = self._peek()
        if token is not None and token.kind is kind:
            self.pos += 1
            return token
        self._expect(kind.label)
        return None

    def error(self) -> RegexSyntaxError:
        position = max(self._furthest, 0)
        found = (
            str(self.tokens[position]) if position < len(self.tokens) else "end of input"
        )
        return RegexSyntaxError(
            f"Error at position {position}: found {found}, "
            f"expected one of: {', '.join(self._expected)}"
        )

    def parse_all(self) -> Regex:
        result = self._alternation()
        if result is not None and self.pos == len(self.tokens):
            return result
        if result is not None:
            self._expect("end of input")
        raise self.error()

    def _alternation(self) -> Regex | None:
        result = self._concatenation()
        if result is None:
            return None
        while True:
            saved = self.pos
            if self._accept(TokenKind.PIPE) is None:
                return result
            branch = self._concatenation()
            if branch is None:
                self.pos = saved
                return result
            result = Or(result, branch)

    def _concatenation(self) -> Regex | None:
        items: list[Regex] = []
        while (item := self._repetition()) is not None:
            items.append(item)
        if not items:
            return None
        return reduce(Concat, items)

    def _repetition(self) -> Regex | None:
        atom = self._atom()
        if atom is None:
            return None
        count = self._repetition_count()
        return atom if count is None else Repeat(atom, count)

    def _atom(self) -> Regex | None:
        for alternative in (self._literal, self._class, self._group):
            saved = self.pos
            result = alternative()
            if result is not None:
                return result
            self.pos = saved
        return None

    def _literal(self) -> Regex | None:
        saved = self.pos
        if self._accept(TokenKind.BACKSLASH) is not None:
            token = self._peek()
            if token is not None and token.kind is TokenKind.LITERAL and token.char in _SPECIAL_SEQUENCES:
                self.pos += 1
                return _SPECIAL_SEQUENCES[token.char]
            if token is not None and token.char in NON_CLASS_ESCAPE_CHARS:
                self.pos += 1
                return Literal(token.char)
            self._expect("escaped character")
            self.pos = saved
            return None
        token = self._peek()
        if token is not None and token.char not in NON_CLASS_ESCAPE_CHARS:
            self.pos += 1
            return Literal(token.char)
        self._expect("literal")
        return None

    def _class(self) -> Regex | None:
        if self._accept(TokenKind.OPEN_BRACKET) is None:
            return None
        ranges: list[CharRange] = []
        while (member := self._class_range()) is not None:
            ranges.append(member)
        if self._accept(TokenKind.CLOSE_BRACKET) is None:
            return None
        return Class(tuple(ranges))

    def _class_range(self) -> CharRange | None:
        start = self._class_char()
        if start is None:
            return None
        saved = self.pos
        if self._accept(TokenKind.HYPHEN) is not None:
            end = self._class_char()
            if end is not None:
                return Span(start, end)
        self.pos = saved
        return Single(start)

    def _class_char(self) -> str | None:
        saved = self.pos
        if self._accept(TokenKind.BACKSLASH) is not None:
            token = self._peek()
            if token is not None and token.char in CLASS_ESCAPE_CHARS:
                self.pos += 1
                return token.char
            self._expect("escaped class character")
            self.pos = saved
            return None
        token = self._peek()
        if (
            token is not None
            and token.kind in _CLASS_CHAR_KINDS
            and token.char not in CLASS_ESCAPE_CHARS
        ):
            self.pos += 1
            return token.char
        self._expect("class character")
        return None

    def _group(self) -> Regex | None:
        if self._accept(TokenKind.OPEN_PAREN) is None:
            return None
        inner = self._alternation()
        if inner is None or self._accept(TokenKind.CLOSE_PAREN) is None:
            return None
        return inner

    def _repetition_count(self) -> Count | None:
        saved = self.pos
        count = self._braced_count()
        if count is not None:
            return count
        self.pos = saved
        token = self._peek()
        if token is not None and token.kind in _SIMPLE_REPETITIONS:
            self.pos += 1
            return _SIMPLE_REPETITIONS[token.kind]
        for kind in _SIMPLE_REPETITIONS:
            self._expect(kind.label)
        return None

    def _braced_count(self) -> Count | None:
        if self._accept(TokenKind.OPEN_CURLY) is None:
            return None
        low = self._number()
        if low is None:
            return None
        if self._accept(TokenKind.COMMA) is not None:
            saved = self.pos
            high = self._number()
            if high is not None and self._accept(TokenKind.CLOSE_CURLY) is not None:
                return Between(low, high)
            self.pos = saved
            if self._accept(TokenKind.CLOSE_CURLY) is not None:
                return AtLeast(low)
            return None
        if self._accept(TokenKind.CLOSE_CURLY) is not None:
            return Exact(low)
        return None

    def _number(self) -> int | None:
        collected: list[str] = []
        while (token := self._peek()) is not None and token.kind is TokenKind.LITERAL and token.char in digits:
            collected.append(token.char)
            self.pos += 1
        if not collected:
            self._expect("digit")
            return None
        return int("".join(collected))


def parse(pattern: str) -> Regex:
    """Parse ``pattern`` into a simplified Regex; raise RegexSyntaxError if invalid."""
    try:
        tokens = tokenize(pattern)
    except RegexSyntaxError as err:
        raise RegexSyntaxError("Failed to tokenize input") from err
    return _Parser(tokens).parse_all().simplify()