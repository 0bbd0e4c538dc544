"""Character-class members and repetition counts used by regex nodes."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CLASS_ESCAPE_CHARS",
    "NON_CLASS_ESCAPE_CHARS",
    "AtLeast",
    "Between",
    "CharRange",
    "Count",
    "Exact",
    "Single",
    "Span",
    "escape_char",
]

CLASS_ESCAPE_CHARS = frozenset("[]-\\")
NON_CLASS_ESCAPE_CHARS = frozenset("[](){}?*+|\\.")


def escape_char(c: str, in_class: bool) -> str:
    """Return ``c`` as it is written in a pattern, escaped if needed."""
    special = CLASS_ESCAPE_CHARS if in_class else NON_CLASS_ESCAPE_CHARS
    return f"\\{c}" if c in special else c


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_count(n: int) -> None:
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"repetition count must be a non-negative integer, got {n!r}")


@dataclass(frozen=True)
class Single:
    """A single character in a character class, such as ``a``."""

    char: str

    def __post_init__(self) -> None:
        _check_char(self.char)

    @property
    def start(self) -> str:
        """The lowest character covered."""
        return self.char

    def contains(self, c: str) -> bool:
        """Return whether ``c`` is this character."""
        return c == self.char

    def __str__(self) -> str:
        return escape_char(self.char, True)


@dataclass(frozen=True)
class Span:
    """An inclusive range of characters in a character class, such as ``a-z``."""

    start: str
    end: str

    def __post_init__(self) -> None:
        _check_char(self.start)
        _check_char(self.end)

    def contains(self, c: str) -> bool:
        """Return whether ``c`` lies between the bounds, inclusive."""
        return self.start <= c <= self.end

    def __str__(self) -> str:
        return f"{escape_char(self.start, True)}-{escape_char(self.end, True)}"


CharRange = Single | Span


@dataclass(frozen=True)
class Exact:
    """Match exactly ``n`` times."""

    n: int

    def __post_init__(self) -> None:
        _check_count(self.n)

    @property
    def allows_zero(self) -> bool:
        """Whether zero repetitions satisfy this count."""
        return self.n == 0

    def decremented(self) -> Exact:
        """The count left after one repetition has been consumed."""
        return Exact(max(self.n - 1, 0))

    def __str__(self) -> str:
        return f"{{{self.n}}}"


@dataclass(frozen=True)
class Between:
    """Match between ``min`` and ``max`` times, inclusive."""

    min: int
    max: int

    def __post_init__(self) -> None:
        _check_count(self.min)
        _check_count(self.max)

    @property
    def allows_zero(self) -> bool:
        """Whether zero repetitions satisfy this count."""
        return self.min == 0

    def decremented(self) -> Between:
        """The count left after one repetition has been consumed."""
        return Between(max(self.min - 1, 0), max(self.max - 1, 0))

    def __str__(self) -> str:
        if self.min == 0 and self.max == 1:
            return "?"
        return f"{{{self.min},{self.max}}}"


@dataclass(frozen=True)
class AtLeast:
    """Match ``min`` or more times."""

    min: int

    def __post_init__(self) -> None:
        _check_count(self.min)

    @property
    def allows_zero(self) -> bool:
        """Whether zero repetitions satisfy this count."""
        return self.min == 0

    def decremented(self) -> AtLeast:
        """The count left after one repetition has been consumed."""
        return AtLeast(max(self.min - 1, 0))

    def __str__(self) -> str:
        if self.min == 0:
            return "*"
        if self.min == 1:
            return "+"
        return f"{{{self.min},}}"


Count = Exact | Between | AtLeast