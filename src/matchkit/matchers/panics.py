"""Matchers for callables that are expected to raise (or not to raise)."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from matchkit.matchers.base import Matcher
from matchkit.result import MatchResult, MatchResultBuilder

logger = logging.getLogger(__name__)


def _format_exception(exc: BaseException) -> str:
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


class Raises(Matcher):
    """Call the zero-argument subject and compare its outcome with the expectation.

    Any ``Exception`` raised by the subject is contained here and turned into
    a MatchResult; cleanup inside the subject (``finally``, ``with``) runs as
    the exception unwinds. Other ``BaseException``s such as
    ``KeyboardInterrupt`` and ``SystemExit`` are captured only when
    ``exc_type`` names them, e.g. ``raises(SystemExit)``.
    """

    def __init__(
        self,
        expect_exception: bool = True,
        exc_type: type[BaseException] | tuple[type[BaseException], ...] = Exception,
        match: str | None = None,
    ) -> None:
        self.expect_exception = expect_exception
        self.exc_type = exc_type
        self.match = match
        if not expect_exception:
            self.name = "does_not_raise"
        else:
            self.name = f"raises({self._type_name()}{f', match={match!r}' if match is not None else ''})"

    def _type_name(self) -> str:
        if isinstance(self.exc_type, tuple):
            return " | ".join(t.__name__ for t in self.exc_type)
        return self.exc_type.__name__

    def check(self, actual: Callable[[], Any]) -> MatchResult:
        if not callable(actual):
            raise TypeError(f"{self.name} needs a zero-argument callable, got {type(actual).__name__}")

        builder = MatchResultBuilder.for_(self.name)
        try:
            actual()
        except BaseException as exc:
            if not isinstance(exc, Exception) and not isinstance(exc, self.exc_type):
                raise
            logger.debug(f"{self.name}: captured {_format_exception(exc)}")
            return self._check_raised(builder, exc)

        if self.expect_exception:
            return builder.failed_because(f"expected {self._type_name()} but no exception was raised")
        return builder.matched()

    def _check_raised(self, builder: MatchResultBuilder, exc: BaseException) -> MatchResult:
        if not self.expect_exception:
            return builder.failed_because(
                f"expected no exception but one was raised: {_format_exception(exc)}"
            )
        if not isinstance(exc, self.exc_type):
            return builder.failed_because(
                f"expected {self._type_name()} but {_format_exception(exc)} was raised"
            )
        if self.match is not None and re.search(self.match, str(exc)) is None:
            return builder.failed_because(
                f"exception message {str(exc)!r} does not match pattern {self.match!r}"
            )
        return builder.matched()


def raises(
    exc_type: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    match: str | None = None,
) -> Matcher:
    """Match callables that raise *exc_type* (optionally with a message matching *match*)."""
    return Raises(True, exc_type, match)


def does_not_raise() -> Matcher:
    """Match callables that return normally."""
    return Raises(expect_exception=False)


panics = raises
does_not_panic = does_not_raise
