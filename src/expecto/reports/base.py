"""Base reporter protocol for expecto test output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from expecto.testing.runner import RunResult, TestResult
    from expecto.testing.suite import Suite


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async so reporters may do I/O. Sync reporters can
    implement them as coroutines that don't await anything.
    """

    async def on_run_start(self, suite: Suite) -> None:
        """Called once before the first test runs."""
        ...

    async def on_test_complete(self, result: TestResult) -> None:
        """Called after each test's outcome is recorded."""
        ...

    async def on_run_complete(self, run_result: RunResult) -> None:
        """Called after all tests complete."""
        ...

    async def on_run_stopped_early(self, failure_count: int) -> None:
        """Called when the run stops early due to the maxfail limit."""
        ...
