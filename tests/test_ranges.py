import pytest

from rzozowski.ranges import (
    AtLeast,
    Between,
    Exact,
    Single,
    Span,
    escape_char,
)


@pytest.mark.parametrize(
    "c, in_class, expected",
    [
        ("a", False, "a"),
        ("a", True, "a"),
        ("*", False, "\\*"),
        ("*", True, "*"),
        ("-", False, "-"),
        ("-", True, "\\-"),
        ("[", True, "\\["),
        ("[", False, "\\["),
        (".", False, "\\."),
        (".", True, "."),
        ("\\", False, "\\\\"),
        ("\\", True, "\\\\"),
    ],
)
def test_escape_char(c, in_class, expected):
    assert escape_char(c, in_class) == expected


def test_single_contains():
    r = Single("a")
    assert r.contains("a")
    assert not r.contains("b")


def test_span_contains_bounds_and_inside():
    r = Span("c", "e")
    assert r.contains("c")
    assert r.contains("d")
    assert r.contains("e")
    assert not r.contains("b")
    assert not r.contains("f")


def test_class_members_from_source_cases():
    members = [Single("a"), Span("c", "e")]
    assert any(m.contains("a") for m in members)
    assert any(m.contains("d") for m in members)
    assert not any(m.contains("b") for m in members)
    assert not any(m.contains("f") for m in members)


def test_char_range_str():
    assert str(Single("a")) == "a"
    assert str(Single("-")) == "\\-"
    assert str(Span("a", "z")) == "a-z"
    assert str(Span("-", "0")) == "\\--0"


def test_start_used_for_ordering():
    members = [Single("c"), Single("a"), Span("d", "f")]
    ordered = sorted(members, key=lambda m: m.start)
    assert ordered == [Single("a"), Single("c"), Span("d", "f")]


def test_char_validation():
    with pytest.raises(ValueError):
        Single("ab")
    with pytest.raises(ValueError):
        Span("", "z")


@pytest.mark.parametrize(
    "count, expected",
    [
        (Between(2, 3), "{2,3}"),
        (Exact(2), "{2}"),
        (AtLeast(2), "{2,}"),
        (AtLeast(0), "*"),
        (AtLeast(1), "+"),
        (Between(0, 1), "?"),
        (Between(0, 2), "{0,2}"),
    ],
)
def test_count_str(count, expected):
    assert str(count) == expected


@pytest.mark.parametrize(
    "count, expected",
    [
        (Exact(3), Exact(2)),
        (Exact(0), Exact(0)),
        (Between(2, 3), Between(1, 2)),
        (Between(0, 1), Between(0, 0)),
        (Between(0, 0), Between(0, 0)),
        (AtLeast(3), AtLeast(2)),
        (AtLeast(0), AtLeast(0)),
    ],
)
def test_decremented(count, expected):
    assert count.decremented() == expected


@pytest.mark.parametrize(
    "count, expected",
    [
        (Exact(0), True),
        (Exact(1), False),
        (Between(0, 3), True),
        (Between(1, 3), False),
        (AtLeast(0), True),
        (AtLeast(1), False),
    ],
)
def test_allows_zero(count, expected):
    assert count.allows_zero is expected


def test_count_validation():
    with pytest.raises(ValueError):
        Exact(-1)
    with pytest.raises(ValueError):
        Between(1, -2)
    with pytest.raises(ValueError):
        AtLeast(-3)


def test_counts_are_hashable_and_compare_by_value():
    assert {Exact(2), Exact(2), AtLeast(2)} == {Exact(2), AtLeast(2)}
    assert Exact(2) != AtLeast(2)