"""Regular expressions as trees, matched through Brzozowski derivatives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rzozowski.ranges import (
    AtLeast,
    Between,
    CharRange,
    Count,
    Exact,
    Single,
    Span,
    escape_char,
)

__all__ = [
    "Class",
    "Concat",
    "Empty",
    "Epsilon",
    "Literal",
    "Or",
    "Regex",
    "Repeat",
]


def _require_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


class Regex(ABC):
    """Base class of all regular expression nodes."""

    def star(self) -> Repeat:
        """Zero or more repetitions of this expression."""
        return Repeat(self, AtLeast(0))

    def plus(self) -> Repeat:
        """One or more repetitions of this expression."""
        return Repeat(self, AtLeast(1))

    def optional(self) -> Repeat:
        """Zero or one repetition of this expression."""
        return Repeat(self, Between(0, 1))

    @abstractmethod
    def is_nullable(self) -> bool:
        """Return whether the expression matches the empty string."""

    def nullability(self) -> Regex:
        """``Epsilon()`` if the expression is nullable, otherwise ``Empty()``."""
        return Epsilon() if self.is_nullable() else Empty()

    def derivative(self, c: str) -> Regex:
        """The Brzozowski derivative of the expression with respect to ``c``."""
        return self._derive(c).simplify()

    @abstractmethod
    def _derive(self, c: str) -> Regex:
        """The derivative before simplification."""

    @abstractmethod
    def simplify(self) -> Regex:
        """Return an equivalent, algebraically simplified expression."""

    def matches(self, s: str) -> bool:
        """Return whether the whole of ``s`` is matched by the expression."""
        current: Regex = self
        for c in s:
            current = current.derivative(c)
        return current.is_nullable()


@dataclass(frozen=True)
class Empty(Regex):
    """Matches no string at all."""

    def is_nullable(self) -> bool:
        return False

    def _derive(self, c: str) -> Regex:
        return Empty()

    def simplify(self) -> Regex:
        return self

    def __str__(self) -> str:
        return "∅"


@dataclass(frozen=True)
class Epsilon(Regex):
    """Matches only the empty string."""

    def is_nullable(self) -> bool:
        return True

    def _derive(self, c: str) -> Regex:
        return Empty()

    def simplify(self) -> Regex:
        return self

    def __str__(self) -> str:
        return "ε"


@dataclass(frozen=True)
class Literal(Regex):
    """Matches a single given character."""

    char: str

    def __post_init__(self) -> None:
        _require_char(self.char)

    def is_nullable(self) -> bool:
        return False

    def _derive(self, c: str) -> Regex:
        return Epsilon() if c == self.char else Empty()

    def simplify(self) -> Regex:
        return self

    def __str__(self) -> str:
        return escape_char(self.char, False)


@dataclass(frozen=True)
class Concat(Regex):
    """Matches ``left`` followed by ``right``."""

    left: Regex
    right: Regex

    def is_nullable(self) -> bool:
        return self.left.is_nullable() and self.right.is_nullable()

    def _derive(self, c: str) -> Regex:
        return Or(
            Concat(self.left.derivative(c), self.right).simplify(),
            Concat(self.left.nullability(), self.right.derivative(c)).simplify(),
        )

    def simplify(self) -> Regex:
        left = self.left.simplify()
        right = self.right.simplify()
        if left == Empty() or right == Empty():
            return Empty()
        if left == Epsilon():
            return right
        if right == Epsilon():
            return left
        return Concat(left, right)

    def __str__(self) -> str:
        return f"{self.left}{self.right}"


@dataclass(frozen=True)
class Or(Regex):
    """Matches either ``left`` or ``right``."""

    left: Regex
    right: Regex

    def is_nullable(self) -> bool:
        return self.left.is_nullable() or self.right.is_nullable()

    def _derive(self, c: str) -> Regex:
        return Or(self.left.derivative(c), self.right.derivative(c))

    def simplify(self) -> Regex:
        left = self.left.simplify()
        right = self.right.simplify()
        if left == Empty():
            return right
        if right == Empty():
            return left
        if left == right:
            return left
        return Or(left, right)

    def __str__(self) -> str:
        return f"({self.left}|{self.right})"


@dataclass(frozen=True)
class Class(Regex):
    """Matches any one character covered by ``ranges``."""

    ranges: tuple[CharRange, ...] = ()

    def __post_init__(self) -> None:
        ranges = tuple(self.ranges)
        for member in ranges:
            if not isinstance(member, (Single, Span)):
                raise TypeError(f"expected Single or Span, got {member!r}")
        object.__setattr__(self, "ranges", ranges)

    def is_nullable(self) -> bool:
        return False

    def _derive(self, c: str) -> Regex:
        if any(member.contains(c) for member in self.ranges):
            return Epsilon()
        return Empty()

    def simplify(self) -> Regex:
        collapsed = tuple(
            Single(member.start)
            if isinstance(member, Span) and member.start == member.end
            else member
            for member in self.ranges
        )
        if collapsed != self.ranges:
            return Class(collapsed).simplify()
        if len(self.ranges) == 1 and isinstance(self.ranges[0], Single):
            return Literal(self.ranges[0].char)
        return Class(tuple(sorted(self.ranges, key=lambda member: member.start)))

    def __str__(self) -> str:
        return "[" + "".join(str(member) for member in self.ranges) + "]"


@dataclass(frozen=True)
class Repeat(Regex):
    """Matches ``inner`` a number of times given by ``count``."""

    inner: Regex
    count: Count

    def is_nullable(self) -> bool:
        return self.count.allows_zero

    def _derive(self, c: str) -> Regex:
        return Concat(
            self.inner.derivative(c),
            Repeat(self.inner, self.count.decremented()),
        )

    def simplify(self) -> Regex:
        inner = self.inner.simplify()
        count = self.count

        if count == AtLeast(0):
            if inner == Empty():
                return Epsilon()
            if isinstance(inner, Repeat) and inner.count == AtLeast(0):
                return inner
        if count == AtLeast(1) and inner == Epsilon():
            return Epsilon()
        if inner == Empty():
            return Empty()
        if inner == Epsilon():
            return Epsilon()
        if isinstance(count, Between) and count.min == count.max:
            return Repeat(inner, Exact(count.min)).simplify()
        if count == Exact(0):
            return Epsilon()
        if count == Exact(1):
            return inner
        return Repeat(inner, count)

    def __str__(self) -> str:
        return f"({self.inner}){self.count}"