"""Matchers operating on single values: equality, ordering, tolerance, identity."""

from __future__ import annotations

import operator
from typing import Any, Callable

from matchkit.matchers.base import Matcher
from matchkit.result import MatchResult, MatchResultBuilder, describe


class Equal(Matcher):
    """Match values equal (or, with ``negate``, unequal) to ``expected``.

    Not suitable for floating point results; use ``close_to`` instead.
    """

    def __init__(self, expected: Any, negate: bool = False) -> None:
        self.expected = expected
        self.negate = negate
        self.name = f"{'not_equal_to' if negate else 'equal_to'}({describe(expected)})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if (actual == self.expected) != self.negate:
            return builder.matched()
        if self.negate:
            return builder.failed_because(f"{describe(actual)} is equal to {describe(self.expected)}")
        return builder.failed_comparison(actual, self.expected)


class Ordering(Matcher):
    """Compare the subject against ``bound`` with ``comparator(actual, bound)``.

    Incomparable operands of a partial order (NaN, disjoint sets) compare
    False and fail. Operands Python cannot compare at all raise ``TypeError``,
    which is left to propagate.
    """

    def __init__(
        self,
        name: str,
        bound: Any,
        comparator: Callable[[Any, Any], bool],
        symbol: str,
    ) -> None:
        self.bound = bound
        self.comparator = comparator
        self.symbol = symbol
        self.name = f"{name}({describe(bound)})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if self.comparator(actual, self.bound):
            return builder.matched()
        return builder.failed_because(
            f"expected a value {self.symbol} {describe(self.bound)}, got {describe(actual)}"
        )


class CloseTo(Matcher):
    """Match numbers within ``epsilon`` of ``target``.

    A negative ``epsilon`` is accepted at construction but never matches.
    """

    def __init__(self, target: Any, epsilon: Any) -> None:
        self.target = target
        self.epsilon = epsilon
        self.name = f"close_to({describe(target)}, {describe(epsilon)})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if self.epsilon < 0:
            return builder.failed_because(
                f"tolerance must be non-negative, got {describe(self.epsilon)}"
            )
        # NaN distances compare False and fall through to the failure branch
        distance = abs(actual - self.target)
        if distance <= self.epsilon:
            return builder.matched()
        return builder.failed_because(
            f"{describe(actual)} should be between {describe(self.target - self.epsilon)}"
            f" and {describe(self.target + self.epsilon)} (distance {describe(distance)})"
        )


class SameObject(Matcher):
    def __init__(self, expected: Any) -> None:
        self.expected = expected
        self.name = f"same_object({describe(expected)})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if actual is self.expected:
            return builder.matched()
        return builder.failed_because(
            f"expected the object at {id(self.expected):#x}, got {describe(actual)} at {id(actual):#x}"
        )


def equal_to(expected: Any) -> Matcher:
    return Equal(expected)


def not_equal_to(expected: Any) -> Matcher:
    return Equal(expected, negate=True)


def less_than(bound: Any) -> Matcher:
    return Ordering("less_than", bound, operator.lt, "<")


def greater_than(bound: Any) -> Matcher:
    return Ordering("greater_than", bound, operator.gt, ">")


def less_than_or_equal(bound: Any) -> Matcher:
    return Ordering("less_than_or_equal", bound, operator.le, "<=")


def greater_than_or_equal(bound: Any) -> Matcher:
    return Ordering("greater_than_or_equal", bound, operator.ge, ">=")


def close_to(target: Any, epsilon: Any) -> Matcher:
    """Match if the subject lies within ``epsilon`` of ``target``.

    Use this instead of ``equal_to`` for floating point values. There is no
    default tolerance; pick one that fits the computation under test.
    """
    return CloseTo(target, epsilon)


def same_object(expected: Any) -> Matcher:
    """Match only the very object *expected* (``actual is expected``)."""
    return SameObject(expected)


eq = equal_to
ne = not_equal_to
lt = less_than
gt = greater_than
leq = at_most = less_than_or_equal
geq = at_least = greater_than_or_equal
