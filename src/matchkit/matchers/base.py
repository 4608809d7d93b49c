"""The Matcher capability and adapters around it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from matchkit.result import MatchResult, MatchResultBuilder, describe


class Matcher(ABC):
    """A reusable predicate that checks a subject and explains the outcome.

    Subclasses implement ``check``. Matchers never mutate the subject and
    hold no per-call state, so one instance can be checked any number of
    times and shared between combinators.
    """

    name: str = "matcher"

    @abstractmethod
    def check(self, actual: Any) -> MatchResult:
        raise NotImplementedError

    def __call__(self, actual: Any) -> MatchResult:
        return self.check(actual)

    def __and__(self, other: Any) -> Matcher:
        from matchkit.matchers.combinators import AllOf

        return AllOf([self, as_matcher(other)])

    def __or__(self, other: Any) -> Matcher:
        from matchkit.matchers.combinators import AnyOf

        return AnyOf([self, as_matcher(other)])

    def __invert__(self) -> Matcher:
        return Not(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Predicate(Matcher):
    """Adapt a plain callable to the Matcher contract.

    The callable may return a ``MatchResult`` to supply its own message;
    any other return value is judged by its truthiness.
    """

    def __init__(self, fn: Callable[[Any], Any], name: str | None = None) -> None:
        self.fn = fn
        self.name = name or f"satisfies({getattr(fn, '__name__', 'predicate')})"

    def check(self, actual: Any) -> MatchResult:
        outcome = self.fn(actual)
        if isinstance(outcome, MatchResult):
            return outcome

        builder = MatchResultBuilder.for_(self.name)
        if outcome:
            return builder.matched()
        return builder.failed_because(f"{describe(actual)} does not satisfy the predicate")


def predicate(fn: Callable[[Any], Any], name: str | None = None) -> Matcher:
    return Predicate(fn, name)


satisfies = predicate


def as_matcher(obj: Any) -> Matcher:
    """Return *obj* as a Matcher, wrapping bare callables in a Predicate."""
    if isinstance(obj, Matcher):
        return obj
    if callable(obj):
        return Predicate(obj)
    raise TypeError(f"Expected a Matcher or a callable, got {type(obj).__name__}")


class Not(Matcher):
    def __init__(self, matcher: Any) -> None:
        self.matcher = as_matcher(matcher)
        self.name = f"not({self.matcher.name})"

    def check(self, actual: Any) -> MatchResult:
        builder = MatchResultBuilder.for_(self.name)
        if self.matcher.check(actual).passed:
            return builder.failed_because(f"{self.matcher.name} is satisfied")
        return builder.matched()


def not_(matcher: Any) -> Matcher:
    """Match exactly when *matcher* does not."""
    return Not(matcher)


def is_(matcher: Any) -> Matcher:
    """Syntactic sugar: ``assert_that(x, is_(equal_to(1)))``."""
    return as_matcher(matcher)


def always_succeeds() -> Matcher:
    return Predicate(lambda _actual: True, name="succeeds_always")


def always_fails() -> Matcher:
    def _fail(_actual: Any) -> MatchResult:
        return MatchResultBuilder.for_("fails_always").failed_because("this matcher fails always")

    return Predicate(_fail, name="fails_always")
