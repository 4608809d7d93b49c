"""Matcher factories, grouped by what they inspect."""

from matchkit.matchers.base import (
    Matcher,
    Not,
    Predicate,
    always_fails,
    always_succeeds,
    as_matcher,
    is_,
    not_,
    predicate,
    satisfies,
)
from matchkit.matchers.collections import (
    Containment,
    Direction,
    InAnyOrder,
    InOrder,
    all_elements_satisfy,
    contained_in,
    contains_in_any_order,
    contains_in_order,
    contains_subset,
    has_entry,
    has_key,
    has_length,
    has_subset_of,
    has_value,
    is_empty,
    is_subset_of,
    some_elements_satisfy,
    sorted_ascending,
    sorted_descending,
)
from matchkit.matchers.combinators import AllOf, AnyOf, all_of, any_of
from matchkit.matchers.core import (
    CloseTo,
    Equal,
    Ordering,
    at_least,
    at_most,
    close_to,
    eq,
    equal_to,
    geq,
    greater_than,
    greater_than_or_equal,
    gt,
    leq,
    less_than,
    less_than_or_equal,
    lt,
    ne,
    not_equal_to,
    same_object,
)
from matchkit.matchers.panics import Raises, does_not_panic, does_not_raise, panics, raises

__all__ = [
    "AllOf",
    "AnyOf",
    "CloseTo",
    "Containment",
    "Direction",
    "Equal",
    "InAnyOrder",
    "InOrder",
    "Matcher",
    "Not",
    "Ordering",
    "Predicate",
    "Raises",
    "all_elements_satisfy",
    "all_of",
    "always_fails",
    "always_succeeds",
    "any_of",
    "as_matcher",
    "at_least",
    "at_most",
    "close_to",
    "contained_in",
    "contains_in_any_order",
    "contains_in_order",
    "contains_subset",
    "does_not_panic",
    "does_not_raise",
    "eq",
    "equal_to",
    "geq",
    "greater_than",
    "greater_than_or_equal",
    "gt",
    "has_entry",
    "has_key",
    "has_length",
    "has_subset_of",
    "has_value",
    "is_",
    "is_empty",
    "is_subset_of",
    "leq",
    "less_than",
    "less_than_or_equal",
    "lt",
    "ne",
    "not_",
    "not_equal_to",
    "panics",
    "predicate",
    "raises",
    "same_object",
    "satisfies",
    "some_elements_satisfy",
    "sorted_ascending",
    "sorted_descending",
]
