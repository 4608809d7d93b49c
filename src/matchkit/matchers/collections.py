"""Matchers for sequences, collections and mappings.

Elements are compared with ``==`` only, so unhashable elements work and
duplicates are counted rather than merely checked for presence.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Iterable

from matchkit.matchers.base import Matcher, as_matcher
from matchkit.result import MatchResult, MatchResultBuilder, describe


def _materialize(actual: Iterable[Any], name: str) -> list[Any]:
    """Copy a re-iterable subject into a list, rejecting one-shot iterators.

    An iterator would be consumed by the first matcher to look at it, leaving
    sibling matchers and later checks an empty subject.
    """
    if isinstance(actual, Iterator):
        raise TypeError(
            f"{name} needs a re-iterable collection, got the one-shot iterator {type(actual).__name__};"
            " pass list(...) instead"
        )
    return list(actual)


def _count(items: list[Any], value: Any) -> int:
    return sum(1 for item in items if item == value)


def _distinct(items: list[Any]) -> list[Any]:
    seen: list[Any] = []
    for item in items:
        if not any(item == s for s in seen):
            seen.append(item)
    return seen


def match_counted(expected: list[Any], actual: list[Any]) -> tuple[list[Any], list[Any]]:
    """Pair every expected element with one unused equal element of *actual*.

    Returns the expected elements left without a partner and the actual
    elements never consumed. Greedy pairing is exact as long as ``==`` is an
    equivalence relation: any two equal candidates are interchangeable.
    """
    unused = list(range(len(actual)))
    unmatched: list[Any] = []
    for item in expected:
        for position, index in enumerate(unused):
            if actual[index] == item:
                del unused[position]
                break
        else:
            unmatched.append(item)
    return unmatched, [actual[i] for i in unused]


def _explain_multiset(
    expected: list[Any],
    actual: list[Any],
    unmatched: list[Any],
    leftover: list[Any],
) -> list[str]:
    problems: list[str] = []
    for item in _distinct(unmatched):
        found = _count(actual, item)
        if found:
            problems.append(
                f"count mismatch for {describe(item)}: expected {_count(expected, item)}, found {found}"
            )
        else:
            problems.append(f"missing element {describe(item)}")
    for item in _distinct(leftover):
        wanted = _count(expected, item)
        if wanted:
            problems.append(
                f"count mismatch for {describe(item)}: expected {wanted}, found {_count(actual, item)}"
            )
        else:
            problems.append(f"unexpected element {describe(item)}")
    return problems


class InOrder(Matcher):
    def __init__(self, expected: Iterable[Any]) -> None:
        self.expected = list(expected)
        self.name = f"contains_in_order({describe(self.expected)})"

    def check(self, actual: Iterable[Any]) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        items = _materialize(actual, self.name)
        if len(items) != len(self.expected):
            return builder.failed_because(
                f"expected {len(self.expected)} element(s), got {len(items)}: {describe(items)}"
            )
        for index, (got, wanted) in enumerate(zip(items, self.expected)):
            if not (got == wanted):
                return builder.failed_because(
                    f"element {index} differs: expected {describe(wanted)}, got {describe(got)}"
                )
        return builder.matched()


class InAnyOrder(Matcher):
    def __init__(self, expected: Iterable[Any]) -> None:
        self.expected = list(expected)
        self.name = f"contains_in_any_order({describe(self.expected)})"

    def check(self, actual: Iterable[Any]) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        items = _materialize(actual, self.name)
        unmatched, leftover = match_counted(self.expected, items)
        if not unmatched and not leftover:
            return builder.matched()
        problems = _explain_multiset(self.expected, items, unmatched, leftover)
        return builder.failed_because("; ".join(problems))


class Direction(str, Enum):
    SUPERSET = "superset"
    SUBSET = "subset"


class Containment(Matcher):
    """Counted containment between the subject and ``expected``.

    ``SUPERSET``: the subject holds every expected element (extras allowed).
    ``SUBSET``: every subject element occurs in ``expected``.
    """

    def __init__(self, expected: Iterable[Any], direction: Direction) -> None:
        self.expected = list(expected)
        self.direction = direction
        label = "contains_subset" if direction is Direction.SUPERSET else "contained_in"
        self.name = f"{label}({describe(self.expected)})"

    def check(self, actual: Iterable[Any]) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        items = _materialize(actual, self.name)
        if self.direction is Direction.SUPERSET:
            required, pool = self.expected, items
        else:
            required, pool = items, self.expected

        unmatched, _ = match_counted(required, pool)
        if not unmatched:
            return builder.matched()

        problems = []
        for item in _distinct(unmatched):
            available = _count(pool, item)
            if available:
                problems.append(
                    f"count mismatch for {describe(item)}: needed {_count(required, item)}, available {available}"
                )
            elif self.direction is Direction.SUPERSET:
                problems.append(f"missing element {describe(item)}")
            else:
                problems.append(f"unexpected element {describe(item)}")
        return builder.failed_because("; ".join(problems))


class Sorted(Matcher):
    def __init__(self, descending: bool = False) -> None:
        self.descending = descending
        self.name = "sorted_descending" if descending else "sorted_ascending"

    def check(self, actual: Iterable[Any]) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        items = _materialize(actual, self.name)
        for index in range(1, len(items)):
            previous, current = items[index - 1], items[index]
            in_order = previous >= current if self.descending else previous <= current
            if not in_order:
                return builder.failed_because(
                    f"element {index} ({describe(current)}) is out of order after {describe(previous)}"
                )
        return builder.matched()


class EachElement(Matcher):
    """Apply ``matcher`` to each element, requiring all (or some) to match."""

    def __init__(self, matcher: Any, require_all: bool = True) -> None:
        self.matcher = as_matcher(matcher)
        self.require_all = require_all
        prefix = "all_elements_satisfy" if require_all else "some_elements_satisfy"
        self.name = f"{prefix}({self.matcher.name})"

    def check(self, actual: Iterable[Any]) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        for index, item in enumerate(_materialize(actual, self.name)):
            result = self.matcher.check(item)
            if self.require_all and not result.passed:
                return builder.failed_because(f"element {index}: {result.reason}")
            if not self.require_all and result.passed:
                return builder.matched()
        if self.require_all:
            return builder.matched()
        return builder.failed_because("no element satisfies the matcher")


class HasLength(Matcher):
    def __init__(self, length: int) -> None:
        self.length = length
        self.name = f"has_length({length})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        size = len(actual)
        if size == self.length:
            return builder.matched()
        return builder.failed_because(f"expected length {self.length}, got {size}: {describe(actual)}")


class MappingMatcher(Matcher):
    """Look up keys and values of a ``Mapping`` subject."""

    _missing = object()

    def __init__(self, key: Any = _missing, value: Any = _missing) -> None:
        self.key = key
        self.value = value
        if value is self._missing:
            self.name = f"has_key({describe(key)})"
        elif key is self._missing:
            self.name = f"has_value({describe(value)})"
        else:
            self.name = f"has_entry({describe(key)}, {describe(value)})"

    def check(self, actual: Mapping[Any, Any]) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if not isinstance(actual, Mapping):
            return builder.failed_because(f"expected a mapping, got {type(actual).__name__}")

        if self.key is self._missing:
            if any(v == self.value for v in actual.values()):
                return builder.matched()
            return builder.failed_because(f"no key maps to {describe(self.value)}")

        if self.key not in actual:
            return builder.failed_because(f"key {describe(self.key)} not found in {describe(actual)}")
        if self.value is self._missing or actual[self.key] == self.value:
            return builder.matched()
        return builder.failed_because(
            f"key {describe(self.key)} maps to {describe(actual[self.key])}, expected {describe(self.value)}"
        )


def contains_in_order(expected: Iterable[Any]) -> Matcher:
    """Match sequences equal to *expected* element by element."""
    return InOrder(expected)


def contains_in_any_order(expected: Iterable[Any]) -> Matcher:
    """Match collections holding the same elements as *expected*, counted, in any order.

    ``contains_in_any_order([1, 1, 2])`` matches ``[2, 1, 1]`` but not
    ``[1, 2, 2]``.
    """
    return InAnyOrder(expected)


def contains_subset(expected: Iterable[Any]) -> Matcher:
    """Match collections containing every element of *expected*."""
    return Containment(expected, Direction.SUPERSET)


def contained_in(expected: Iterable[Any]) -> Matcher:
    """Match collections whose every element occurs in *expected*."""
    return Containment(expected, Direction.SUBSET)


def sorted_ascending() -> Matcher:
    return Sorted()


def sorted_descending() -> Matcher:
    return Sorted(descending=True)


def all_elements_satisfy(matcher: Any) -> Matcher:
    return EachElement(matcher)


def some_elements_satisfy(matcher: Any) -> Matcher:
    return EachElement(matcher, require_all=False)


def has_length(length: int) -> Matcher:
    return HasLength(length)


def is_empty() -> Matcher:
    return HasLength(0)


def has_key(key: Any) -> Matcher:
    return MappingMatcher(key=key)


def has_value(value: Any) -> Matcher:
    return MappingMatcher(value=value)


def has_entry(key: Any, value: Any) -> Matcher:
    return MappingMatcher(key=key, value=value)


has_subset_of = contains_subset
is_subset_of = contained_in
