"""Match results and the builder every matcher uses to produce them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from matchkit.config import get_config


def describe(value: Any) -> str:
    """Render *value* for a failure message, truncated to the configured length."""
    text = repr(value)
    limit = get_config().max_repr_length
    if limit is not None and len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


@dataclass(frozen=True)
class MatchResult:
    """Outcome of checking one subject against one matcher.

    Attributes:
        name: Name of the matcher that produced the result
            (e.g. "less_than(5)").
        passed: Whether the subject matched.
        reason: Human-readable explanation, prefixed with ``name``.
            Empty for a match, never empty for a failure.
    """

    name: str
    passed: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.passed

    @property
    def failed(self) -> bool:
        return not self.passed


class MatchResultBuilder:
    """Single-use builder seeded with the name of the evaluating matcher."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._finalized = False

    @classmethod
    def for_(cls, name: str) -> MatchResultBuilder:
        return cls(name)

    def _finalize(self) -> None:
        if self._finalized:
            raise RuntimeError(f"Result builder for '{self.name}' was already finalized")
        self._finalized = True

    def matched(self) -> MatchResult:
        self._finalize()
        return MatchResult(name=self.name, passed=True)

    def failed_because(self, detail: str) -> MatchResult:
        self._finalize()
        detail = detail or "no reason given"
        return MatchResult(name=self.name, passed=False, reason=f"{self.name}: {detail}")

    def failed_comparison(self, actual: Any, expected: Any) -> MatchResult:
        return self.failed_because(f"expected {describe(expected)}, got {describe(actual)}")
