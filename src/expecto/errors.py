"""Error types raised by expecto."""

from __future__ import annotations

from typing import Any


class ExpectoError(Exception):
    """Base class for expecto errors."""


class ConfigurationError(ExpectoError):
    """Raised when tests, hooks or settings are declared incorrectly (author error)."""


class MatcherUsageError(ExpectoError, TypeError):
    """Raised when a matcher is applied to a value it cannot handle."""


class RejectedValue(ExpectoError):
    """Raised when a deferred value failed while success was expected."""

    def __init__(self, reason: BaseException, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or f"Deferred value rejected: {reason!r}")


class TestTimeout(ExpectoError):
    """Raised when a test body or hook does not finish in time."""

    __test__ = False

    def __init__(self, timeout: float, what: str = "test") -> None:
        self.timeout = timeout
        self.what = what
        super().__init__(f"Exceeded timeout of {timeout:g}s for {what}")


class AssertionFailure(AssertionError):
    """A matcher predicate did not hold."""

    def __init__(
        self,
        matcher: str,
        subject: Any,
        expected: Any = None,
        *,
        negated: bool = False,
        message: str | None = None,
        diff: str | None = None,
    ) -> None:
        self.matcher = matcher
        self.subject = subject
        self.expected = expected
        self.negated = negated
        self.diff = diff

        not_part = ".not_" if negated else ""
        text = f"expect(received){not_part}.{matcher}(expected)"
        if message:
            text += f"\n\n{message}"
        if diff:
            text += f"\n\n{diff}"
        super().__init__(text)


__all__ = [
    "AssertionFailure",
    "ConfigurationError",
    "ExpectoError",
    "MatcherUsageError",
    "RejectedValue",
    "TestTimeout",
]
