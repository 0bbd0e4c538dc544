# rzozowski

A small regular-expression library that matches strings by taking
Brzozowski derivatives. Each character of the input is consumed by
differentiating the expression with respect to it. The string matches
if what remains accepts the empty string.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Parse a pattern and match whole strings against it:

```python
from rzozowski.parser import parse

regex = parse("(a|b)*c+")
regex.matches("abbaccc")   # True
regex.matches("ab")        # False
```

`parse` returns an expression that has already been simplified.

Derivatives are ordinary expressions. You can print them, compare them
and keep matching from them:

```python
r = parse(r"\d{3,6}[a-z_]+")
r.derivative("1") == parse(r"\d{2,5}[a-z_]+")   # True
```

You can also build expressions by hand from the node classes in
`rzozowski.regex`:

- `Empty`, `Epsilon`, `Literal`, `Concat`, `Or`, `Class` and `Repeat`
  are the node classes.
- The repetition counts for `Repeat` are `Exact`, `Between` and
  `AtLeast`, from `rzozowski.ranges`.
- The members of a `Class` are `Single` and `Span`, also from
  `rzozowski.ranges`.

```python
from rzozowski.regex import Concat, Literal

ab_star = Concat(Literal("a"), Literal("b").star())
ab_star.matches("abbb")   # True
str(ab_star)              # "a(b)*"
```

Every expression has these methods:

- `star()`, `plus()` and `optional()` wrap the expression in a `Repeat`.
- `derivative(c)` returns the simplified derivative with respect to
  the character `c`.
- `simplify()` applies algebraic identities such as `r∅ = ∅`, `εr = r`,
  `r|r = r`, `(r*)* = r*`, `r{n,n} = r{n}` and `r{1} = r`. It also
  sorts the members of a class.
- `is_nullable()` returns whether the expression accepts the empty
  string.
- `nullability()` returns the same answer as `Epsilon()` or `Empty()`.

Expressions are frozen dataclasses, so they compare by value and can be
hashed.

## Supported syntax

- Literal characters. A `\` escapes `[ ] ( ) { } ? * + | \ .`, and those
  characters must be escaped to be matched literally.
- `\d` matches a digit. `\w` matches a letter, a digit or `_`.
- Character classes such as `[a-z]`, `[a-zA-Z0-9_]` and `[\--0]`.
  - Inside a class, `\` escapes `[ ] - \`.
  - `%`, `+`, `.` and `@` may appear unescaped inside a class.
- Alternation `a|b` and grouping `( … )`.
- Repetition with `*`, `+`, `?`, `{n}`, `{n,m}` and `{n,}`.

A pattern that cannot be parsed raises `rzozowski.lexer.RegexSyntaxError`,
which is a subclass of `ValueError`. This includes the empty pattern.
For parse errors, the message gives the position reached and the tokens
that were expected there.

## What it does not do

- Matching always covers the whole string. There is no searching for a
  match inside a longer string.
- There are no anchors.
- There is no wildcard `.`.
- There are no negated classes.
- There are no capture groups.
- There is no command-line tool. The package is used as a library only.