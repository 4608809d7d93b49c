"""Tests for single-value matchers and the Matcher adapters."""

import math

import pytest

from matchkit.matchers.base import Matcher, always_fails, always_succeeds, as_matcher, is_, not_, predicate
from matchkit.matchers.core import (
    at_least,
    at_most,
    close_to,
    eq,
    equal_to,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    not_equal_to,
    same_object,
)
from matchkit.result import MatchResultBuilder


# --- equality ---


@pytest.mark.parametrize("actual", [0, 1, 2, -1])
def test_equal_to_matches_iff_equal(actual):
    assert equal_to(1).check(actual).passed is (actual == 1)


def test_equal_to_failure_shows_expected_and_actual():
    result = equal_to([1, 2]).check([1, 3])
    assert result.passed is False
    assert result.reason == "equal_to([1, 2]): expected [1, 2], got [1, 3]"


def test_eq_is_equal_to():
    assert eq("a")("a").passed is True


def test_not_equal_to():
    assert not_equal_to(1).check(2).passed is True
    result = not_equal_to(1).check(1)
    assert result.passed is False
    assert "1 is equal to 1" in result.reason


# --- ordering ---


def test_less_than():
    assert less_than(5).check(3).passed is True
    assert less_than(5).check(5).passed is False


def test_greater_than():
    assert greater_than(0).check(3).passed is True
    assert greater_than(0).check(0).passed is False


def test_inclusive_bounds():
    assert less_than_or_equal(5).check(5).passed is True
    assert greater_than_or_equal(5).check(5).passed is True
    assert at_most(5).check(6).passed is False
    assert at_least(5).check(4).passed is False


def test_ordering_failure_message():
    result = less_than(5).check(7)
    assert result.name == "less_than(5)"
    assert result.reason == "less_than(5): expected a value < 5, got 7"


def test_ordering_partial_order_incomparable_fails():
    assert less_than({1, 2}).check({3}).passed is False
    assert greater_than({1, 2}).check({3}).passed is False
    assert less_than(1.0).check(math.nan).passed is False


def test_ordering_uncomparable_types_propagate():
    with pytest.raises(TypeError):
        less_than(5).check("a")


# --- tolerance ---


@pytest.mark.parametrize(
    "actual, expected",
    [
        (1.0, True),
        (1.05, True),
        (0.95, True),
        (1.2, False),
        (0.8, False),
    ],
)
def test_close_to(actual, expected):
    assert close_to(1.0, 0.1).check(actual).passed is expected


def test_close_to_boundary_is_inclusive():
    assert close_to(10, 2).check(12).passed is True
    assert close_to(10, 2).check(8).passed is True


def test_close_to_zero_epsilon_is_exact():
    assert close_to(0.5, 0.0).check(0.5).passed is True
    assert close_to(0.5, 0.0).check(0.5000001).passed is False


@pytest.mark.parametrize("actual", [1.0, 0.0, -1.0, 1e9])
def test_close_to_negative_epsilon_never_matches(actual):
    result = close_to(1.0, -0.5).check(actual)
    assert result.passed is False
    assert "tolerance must be non-negative" in result.reason


def test_close_to_nan_fails():
    assert close_to(1.0, 0.5).check(math.nan).passed is False
    assert close_to(math.nan, 0.5).check(1.0).passed is False


def test_close_to_failure_names_range():
    result = close_to(1.0, 0.5).check(2.0)
    assert "between 0.5 and 1.5" in result.reason
    assert result.reason.startswith("close_to(1.0, 0.5): ")


# --- identity ---


def test_same_object():
    value = [1, 2]
    assert same_object(value).check(value).passed is True
    assert same_object(value).check([1, 2]).passed is False


# --- adapters ---


def test_predicate_from_bool():
    def is_even(x):
        return x % 2 == 0

    matcher = predicate(is_even)
    assert matcher.name == "satisfies(is_even)"
    assert matcher.check(2).passed is True
    result = matcher.check(3)
    assert result.passed is False
    assert result.reason == "satisfies(is_even): 3 does not satisfy the predicate"


def test_predicate_returning_match_result_is_used_directly():
    def positive(x):
        builder = MatchResultBuilder.for_("positive")
        return builder.matched() if x > 0 else builder.failed_because(f"{x} is not positive")

    result = predicate(positive).check(-2)
    assert result.reason == "positive: -2 is not positive"


def test_predicate_custom_name():
    assert predicate(bool, name="truthy").check(0).reason.startswith("truthy: ")


def test_as_matcher():
    matcher = equal_to(1)
    assert as_matcher(matcher) is matcher
    assert isinstance(as_matcher(lambda x: True), Matcher)
    with pytest.raises(TypeError):
        as_matcher(42)


def test_not():
    assert not_(equal_to(1)).check(2).passed is True
    result = not_(equal_to(1)).check(1)
    assert result.name == "not(equal_to(1))"
    assert result.reason == "not(equal_to(1)): equal_to(1) is satisfied"


def test_invert_operator_negates():
    assert (~less_than(5)).check(7).passed is True


def test_is_returns_matcher_unchanged():
    matcher = equal_to(1)
    assert is_(matcher) is matcher


def test_always_succeeds_and_fails():
    assert always_succeeds().check(object()).passed is True
    result = always_fails().check(None)
    assert result.passed is False
    assert result.reason == "fails_always: this matcher fails always"


def test_matcher_is_stateless():
    matcher = close_to(3.0, 0.1)
    assert matcher.check(3.05) == matcher.check(3.05)
    assert matcher.check(4.0) == matcher.check(4.0)


def test_matcher_does_not_mutate_subject():
    subject = [3, 1, 2]
    equal_to([1, 2, 3]).check(subject)
    assert subject == [3, 1, 2]
