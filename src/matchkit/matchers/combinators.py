"""Conjunction and disjunction over an ordered list of matchers."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from matchkit.matchers.base import Matcher, as_matcher
from matchkit.result import MatchResult, MatchResultBuilder

logger = logging.getLogger(__name__)


def _join_names(matchers: tuple[Matcher, ...]) -> str:
    return ", ".join(m.name for m in matchers)


class AllOf(Matcher):
    """Match when every child matches; an empty list matches anything.

    Children are checked in order and checking stops at the first failure,
    whose reason becomes the reported detail.
    """

    def __init__(self, matchers: Iterable[Any]) -> None:
        self.matchers = tuple(as_matcher(m) for m in matchers)
        self.name = f"all_of({_join_names(self.matchers)})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        for index, matcher in enumerate(self.matchers):
            result = matcher.check(actual)
            logger.debug(f"{self.name}: child {index} {matcher.name} passed={result.passed}")
            if not result.passed:
                return builder.failed_because(result.reason)
        return builder.matched()


class AnyOf(Matcher):
    """Match when at least one child matches; an empty list matches nothing.

    When no child matches, the reasons of all children are reported in order.
    """

    def __init__(self, matchers: Iterable[Any]) -> None:
        self.matchers = tuple(as_matcher(m) for m in matchers)
        self.name = f"any_of({_join_names(self.matchers)})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if not self.matchers:
            return builder.failed_because("no alternatives given")

        reasons: list[str] = []
        for index, matcher in enumerate(self.matchers):
            result = matcher.check(actual)
            logger.debug(f"{self.name}: child {index} {matcher.name} passed={result.passed}")
            if result.passed:
                return builder.matched()
            reasons.append(result.reason)
        return builder.failed_because("none of the alternatives matched: " + "; ".join(reasons))


def all_of(*matchers: Any) -> Matcher:
    return AllOf(matchers)


def any_of(*matchers: Any) -> Matcher:
    return AnyOf(matchers)
