"""Composable matchers for expressive assertions in test code."""

from matchkit.assertions import ExpectationRecord, Expectations, assert_that, expectations
from matchkit.config import MatchkitConfig, configure, get_config, load_config, reset_config
from matchkit.errors import ExpectationsFailed, MatchAssertionError
from matchkit.matchers import *  # noqa: F401,F403
from matchkit.matchers import __all__ as _matcher_names
from matchkit.result import MatchResult, MatchResultBuilder, describe

__all__ = [
    "ExpectationRecord",
    "Expectations",
    "ExpectationsFailed",
    "MatchAssertionError",
    "MatchResult",
    "MatchResultBuilder",
    "MatchkitConfig",
    "assert_that",
    "configure",
    "describe",
    "expectations",
    "get_config",
    "load_config",
    "reset_config",
    *_matcher_names,
]
