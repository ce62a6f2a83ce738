"""Assertion result records."""

import logging
from typing import Any

from pydantic import BaseModel, SerializationInfo, field_serializer

from expecto.context import current_test_context

logger = logging.getLogger(__name__)


def _truncate(value: Any, max_len: int = 80) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class AssertionResult(BaseModel):
    """Result of evaluating one matcher inside a test.

    Attributes:
    ----------
    matcher: str
        Name of the matcher that was evaluated (e.g. ``to_equal``)
    passed: bool
        Whether the assertion held, after negation
    negated: bool
        Whether the matcher was reached through ``.not_``
    actual: str
        Repr of the received value
    expected: str | None
        Repr of the expected argument, if the matcher takes one
    message: str | None
        Failure message, set only when the assertion did not hold
    """

    matcher: str
    passed: bool
    negated: bool = False
    actual: str
    expected: str | None = None
    message: str | None = None

    @field_serializer("actual", "expected")
    def _truncate(self, v: str | None, info: SerializationInfo) -> str | None:
        """Truncate long reprs when the ``truncate`` serialization context flag is set."""
        ctx = info.context or {}
        if v is not None and ctx.get("truncate"):
            max_len = 50
            if len(v) > max_len:
                return v[:max_len] + "..."
        return v

    def __bool__(self) -> bool:
        return self.passed


def record_assertion(
    matcher: str,
    passed: bool,
    actual: Any,
    *,
    negated: bool = False,
    expected: Any = None,
    has_expected: bool = True,
    message: str | None = None,
) -> AssertionResult:
    """Record a matcher evaluation against the active test context."""
    ctx = current_test_context(f"{matcher}()")
    result = AssertionResult(
        matcher=matcher,
        passed=passed,
        negated=negated,
        actual=_truncate(actual),
        expected=_truncate(expected) if has_expected else None,
        message=message,
    )
    ctx.collected_assertion_results.append(result)
    if not passed:
        logger.debug("assertion %s failed in %s", matcher, ctx.test_item_name)
    return result
