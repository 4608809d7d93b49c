"""Exceptions raised by the assertion entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matchkit.config import get_config

if TYPE_CHECKING:
    from matchkit.assertions import ExpectationRecord
    from matchkit.result import MatchResult


def format_failure(result: MatchResult) -> str:
    indent = get_config().indent
    return f"Failed assertion of matcher: {result.name}\n{indent}Because: {result.reason}"


class MatchAssertionError(AssertionError):
    """A subject did not satisfy the matcher given to ``assert_that``."""

    def __init__(self, result: MatchResult) -> None:
        super().__init__(format_failure(result))
        self.result = result


class ExpectationsFailed(AssertionError):
    """One or more expectations recorded in an ``expectations()`` block failed."""

    def __init__(self, failures: list[ExpectationRecord]) -> None:
        indent = get_config().indent
        lines = [f"{len(failures)} expectation(s) failed:"]
        for record in failures:
            lines.append(f"{indent}[{record.label}] {record.result.reason}")
        super().__init__("\n".join(lines))
        self.failures = failures
