"""The ``expect`` entry point and its matchers.

``expect(value)`` wraps a subject in an immutable :class:`Expectation`.
``.not_`` negates the next matcher, ``.resolves`` and ``.rejects`` make the
matcher return a coroutine that first settles the subject::

    expect(2 + 2).to_be(4)
    expect("team").not_.to_match("I")
    await expect(fetch()).resolves.to_be("peanut butter")
"""

from __future__ import annotations

import inspect
import math
import re
from collections.abc import Callable, Container
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from expecto.assertions.base import record_assertion
from expecto.assertions.equality import _is_number, deep_equal, same_value, structural_diff
from expecto.context import current_test_context
from expecto.errors import (
    AssertionFailure,
    ConfigurationError,
    MatcherUsageError,
    RejectedValue,
)
from expecto.types import UNDEFINED

_NO_EXPECTED = object()


class Settle(Enum):
    """Which outcome of a deferred subject a matcher inspects."""

    RESOLVES = "resolves"
    REJECTS = "rejects"


def _format_value(value: Any) -> str:
    return repr(value)


def _ensure_number(matcher: str, label: str, value: Any) -> None:
    if not _is_number(value):
        msg = f"{matcher}: {label} value must be a number, got {value!r}"
        raise MatcherUsageError(msg)


async def _await_subject(subject: Any) -> Any:
    if inspect.isawaitable(subject):
        return await subject
    if callable(subject):
        result = subject()
        if inspect.isawaitable(result):
            return await result
        msg = f"callable subject returned {result!r}, which is not awaitable"
        raise MatcherUsageError(msg)
    msg = f"received value must be awaitable, got {subject!r}"
    raise MatcherUsageError(msg)


@dataclass(frozen=True)
class Expectation:
    """A subject waiting for exactly one matcher call."""

    subject: Any
    negated: bool = False
    settle: Settle | None = None

    @property
    def not_(self) -> Expectation:
        return replace(self, negated=not self.negated)

    @property
    def resolves(self) -> Expectation:
        return replace(self, settle=Settle.RESOLVES)

    @property
    def rejects(self) -> Expectation:
        return replace(self, settle=Settle.REJECTS)

    # -- evaluation -------------------------------------------------------

    def _check(
        self,
        matcher: str,
        predicate: Callable[[Any], bool],
        expected: Any = _NO_EXPECTED,
        *,
        diff: Callable[[Any], str | None] | None = None,
    ) -> Any:
        if self.settle is not None:
            return self._check_settled(matcher, predicate, expected, diff)
        self._evaluate(matcher, predicate, expected, diff)
        return None

    async def _check_settled(
        self,
        matcher: str,
        predicate: Callable[[Any], bool],
        expected: Any,
        diff: Callable[[Any], str | None] | None,
    ) -> None:
        payload = await self._settle_subject(matcher)
        Expectation(payload, self.negated)._evaluate(matcher, predicate, expected, diff)

    async def _settle_subject(self, matcher: str) -> Any:
        name = f"{self.settle.value}.{matcher}" if self.settle else matcher
        try:
            value = await _await_subject(self.subject)
        except MatcherUsageError:
            raise
        except Exception as exc:
            if self.settle is Settle.REJECTS:
                return exc
            message = f"Received deferred value rejected instead of resolved\nRejected to: {exc!r}"
            record_assertion(name, False, exc, negated=self.negated, has_expected=False, message=message)
            raise RejectedValue(exc, message) from exc

        if self.settle is Settle.REJECTS:
            message = f"Received deferred value resolved instead of rejected\nResolved to: {value!r}"
            record_assertion(name, False, value, negated=self.negated, has_expected=False, message=message)
            raise AssertionFailure(name, value, negated=self.negated, message=message)
        return value

    def _evaluate(
        self,
        matcher: str,
        predicate: Callable[[Any], bool],
        expected: Any,
        diff: Callable[[Any], str | None] | None,
    ) -> None:
        has_expected = expected is not _NO_EXPECTED
        current_test_context(f"{matcher}()")

        try:
            passed = bool(predicate(self.subject))
        except MatcherUsageError as exc:
            record_assertion(
                matcher,
                False,
                self.subject,
                negated=self.negated,
                expected=expected if has_expected else None,
                has_expected=has_expected,
                message=str(exc),
            )
            raise

        if self.negated:
            passed = not passed

        message = None
        diff_text = None
        if not passed:
            lines = []
            if has_expected:
                prefix = "Expected: not " if self.negated else "Expected: "
                lines.append(f"{prefix}{_format_value(expected)}")
            lines.append(f"Received: {_format_value(self.subject)}")
            message = "\n".join(lines)
            if diff is not None and not self.negated:
                diff_text = diff(self.subject) or None

        record_assertion(
            matcher,
            passed,
            self.subject,
            negated=self.negated,
            expected=expected if has_expected else None,
            has_expected=has_expected,
            message=message,
        )
        if not passed:
            raise AssertionFailure(
                matcher,
                self.subject,
                expected if has_expected else None,
                negated=self.negated,
                message=message,
                diff=diff_text,
            )

    # -- equality ---------------------------------------------------------

    def to_be(self, expected: Any) -> Any:
        """Subject is the same object (or the same scalar value) as ``expected``."""
        return self._check("to_be", lambda actual: same_value(actual, expected), expected)

    def to_equal(self, expected: Any) -> Any:
        """Subject is recursively, structurally equal to ``expected``."""
        return self._check(
            "to_equal",
            lambda actual: deep_equal(actual, expected),
            expected,
            diff=lambda actual: structural_diff(actual, expected),
        )

    # -- truthiness -------------------------------------------------------

    def to_be_none(self) -> Any:
        return self._check("to_be_none", lambda actual: actual is None)

    def to_be_undefined(self) -> Any:
        return self._check("to_be_undefined", lambda actual: actual is UNDEFINED)

    def to_be_defined(self) -> Any:
        return self._check("to_be_defined", lambda actual: actual is not UNDEFINED)

    def to_be_truthy(self) -> Any:
        return self._check("to_be_truthy", bool)

    def to_be_falsy(self) -> Any:
        return self._check("to_be_falsy", lambda actual: not actual)

    # -- numbers ----------------------------------------------------------

    def _compare(self, matcher: str, expected: Any, op: Callable[[Any, Any], bool]) -> Any:
        def predicate(actual: Any) -> bool:
            _ensure_number(matcher, "received", actual)
            _ensure_number(matcher, "expected", expected)
            return op(actual, expected)

        return self._check(matcher, predicate, expected)

    def to_be_greater_than(self, expected: Any) -> Any:
        return self._compare("to_be_greater_than", expected, lambda a, b: a > b)

    def to_be_greater_than_or_equal(self, expected: Any) -> Any:
        return self._compare("to_be_greater_than_or_equal", expected, lambda a, b: a >= b)

    def to_be_less_than(self, expected: Any) -> Any:
        return self._compare("to_be_less_than", expected, lambda a, b: a < b)

    def to_be_less_than_or_equal(self, expected: Any) -> Any:
        return self._compare("to_be_less_than_or_equal", expected, lambda a, b: a <= b)

    def to_be_close_to(self, expected: Any, precision: int = 2) -> Any:
        """Subject rounds to ``expected`` at ``precision`` decimal digits.

        Passes when ``abs(expected - received) < 10 ** -precision / 2``.
        """

        def predicate(actual: Any) -> bool:
            _ensure_number("to_be_close_to", "received", actual)
            _ensure_number("to_be_close_to", "expected", expected)
            if math.isinf(actual) and math.isinf(expected):
                return actual == expected
            return abs(expected - actual) < 10 ** -precision / 2

        return self._check("to_be_close_to", predicate, expected)

    # -- strings and containers -------------------------------------------

    def to_match(self, pattern: str | re.Pattern[str]) -> Any:
        """Subject contains ``pattern`` (a substring or a compiled regex)."""

        def predicate(actual: Any) -> bool:
            if isinstance(actual, BaseException):
                actual = str(actual)
            if not isinstance(actual, str):
                msg = f"to_match: received value must be a string, got {actual!r}"
                raise MatcherUsageError(msg)
            if isinstance(pattern, re.Pattern):
                return pattern.search(actual) is not None
            if isinstance(pattern, str):
                return pattern in actual
            msg = f"to_match: expected value must be a string or re.Pattern, got {pattern!r}"
            raise MatcherUsageError(msg)

        return self._check("to_match", predicate, pattern)

    def to_contain(self, item: Any) -> Any:
        """Subject (a sequence, set, mapping or string) contains ``item``."""

        def predicate(actual: Any) -> bool:
            if not isinstance(actual, Container):
                msg = f"to_contain: received value must be a container, got {actual!r}"
                raise MatcherUsageError(msg)
            if isinstance(actual, str) and not isinstance(item, str):
                msg = f"to_contain: a string can only contain strings, got {item!r}"
                raise MatcherUsageError(msg)
            try:
                return item in actual
            except TypeError as exc:
                msg = f"to_contain: cannot look for {item!r} in {actual!r}: {exc}"
                raise MatcherUsageError(msg) from exc

        return self._check("to_contain", predicate, item)

    # -- exceptions -------------------------------------------------------

    def to_throw(self, expected: type[BaseException] | str | re.Pattern[str] | None = None) -> Any:
        """Calling the subject raises, optionally an error matching ``expected``.

        ``expected`` may be an exception class, a substring of the message or a
        compiled pattern searched in the message. An exception subject (what
        ``.rejects`` produces) is checked directly.
        """

        def predicate(actual: Any) -> bool:
            if isinstance(actual, BaseException):
                error: BaseException | None = actual
            elif callable(actual):
                try:
                    actual()
                except Exception as exc:
                    error = exc
                else:
                    error = None
            else:
                msg = f"to_throw: received value must be callable, got {actual!r}"
                raise MatcherUsageError(msg)

            if error is None:
                return False
            if expected is None:
                return True
            if isinstance(expected, type) and issubclass(expected, BaseException):
                return isinstance(error, expected)
            if isinstance(expected, re.Pattern):
                return expected.search(str(error)) is not None
            if isinstance(expected, str):
                return expected in str(error)
            msg = f"to_throw: unsupported expected value {expected!r}"
            raise MatcherUsageError(msg)

        if expected is None:
            return self._check("to_throw", predicate)
        return self._check("to_throw", predicate, expected)


class ExpectFactory:
    """Callable ``expect`` plus assertion-count declarations."""

    def __call__(self, subject: Any = UNDEFINED) -> Expectation:
        return Expectation(subject)

    def assertions(self, count: int) -> None:
        """Declare that the running test evaluates exactly ``count`` assertions."""
        ctx = current_test_context("expect.assertions")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            msg = f"expect.assertions() expects a non-negative integer, got {count!r}"
            raise ConfigurationError(msg)
        ctx.expected_assertions = count

    def has_assertions(self) -> None:
        """Declare that the running test evaluates at least one assertion."""
        ctx = current_test_context("expect.has_assertions")
        ctx.requires_assertions = True


expect = ExpectFactory()

__all__ = ["Expectation", "ExpectFactory", "Settle", "expect"]
