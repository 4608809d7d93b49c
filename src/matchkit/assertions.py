"""Entry points that check a subject against a matcher and act on the result."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from matchkit.errors import ExpectationsFailed, MatchAssertionError
from matchkit.matchers.base import as_matcher
from matchkit.result import MatchResult

logger = logging.getLogger(__name__)


def assert_that(actual: Any, matcher: Any) -> MatchResult:
    """Check *actual* against *matcher*, raising ``MatchAssertionError`` on failure."""
    result = as_matcher(matcher).check(actual)
    logger.debug(f"assert_that {result.name}: passed={result.passed}")
    if not result.passed:
        raise MatchAssertionError(result)
    return result


@dataclass
class ExpectationRecord:
    """One checked expectation.

    Attributes:
        label: Caller-supplied label, or "expectation <n>" when omitted.
        result: The MatchResult the matcher produced.
    """

    label: str
    result: MatchResult

    @property
    def passed(self) -> bool:
        return self.result.passed


@dataclass
class Expectations:
    """Collect matcher outcomes instead of stopping at the first failure."""

    records: list[ExpectationRecord] = field(default_factory=list)

    def that(self, actual: Any, matcher: Any, label: str | None = None) -> MatchResult:
        result = as_matcher(matcher).check(actual)
        record = ExpectationRecord(label=label or f"expectation {len(self.records) + 1}", result=result)
        self.records.append(record)
        logger.debug(f"expect {record.label} {result.name}: passed={result.passed}")
        return result

    @property
    def failures(self) -> list[ExpectationRecord]:
        return [r for r in self.records if not r.passed]

    def verify(self) -> None:
        """Raise ``ExpectationsFailed`` listing every failed record, if any."""
        failures = self.failures
        if failures:
            raise ExpectationsFailed(failures)


@contextmanager
def expectations() -> Iterator[Expectations]:
    """Yield an ``Expectations`` collector and verify it when the block exits.

    If the block itself raises, that exception propagates and the collected
    failures are only logged.
    """
    collector = Expectations()
    try:
        yield collector
    except BaseException:
        if collector.failures:
            logger.warning(f"{len(collector.failures)} expectation(s) failed before the block raised")
        raise
    collector.verify()
