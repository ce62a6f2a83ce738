from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from expecto.errors import ConfigurationError

if TYPE_CHECKING:
    from expecto.assertions.base import AssertionResult


TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)


@dataclass(slots=True)
class TestContext:
    """Execution context for a single running test body or hook.

    Attributes
    ----------
    test_item_name
        Display name of the running test or hook.
    test_item_group_name
        Full name of the enclosing group, empty for the root group.
    expected_assertions
        Number of assertions the body declared it will evaluate, if any.
    requires_assertions
        Whether the body declared that at least one assertion must run.
    collected_assertion_results
        Assertion results recorded while this context was active.
    """

    __test__ = False

    test_item_name: str | None = None
    test_item_group_name: str | None = None
    expected_assertions: int | None = None
    requires_assertions: bool = False
    collected_assertion_results: list[AssertionResult] = field(default_factory=list)

    @property
    def assertion_count(self) -> int:
        return len(self.collected_assertion_results)


@contextmanager
def test_context_scope(ctx: TestContext) -> Iterator[None]:
    token = TEST_CONTEXT.set(ctx)
    try:
        yield
    finally:
        TEST_CONTEXT.reset(token)


def current_test_context(action: str = "expect") -> TestContext:
    """Return the active context or raise if no test or hook is running."""
    ctx = TEST_CONTEXT.get()
    if ctx is None:
        msg = f"{action} was called outside of a running test or hook"
        raise ConfigurationError(msg)
    return ctx
