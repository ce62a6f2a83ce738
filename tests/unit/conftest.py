"""Shared fixtures for unit tests."""

import asyncio

import pytest

from expecto.context import TestContext
from expecto.context import test_context_scope as context_scope
from expecto.reports.base import Reporter
from expecto.testing import Runner
from expecto.testing.suite import reset_default_suite


class NullReporter(Reporter):
    """Silent reporter that remembers what it was told."""

    def __init__(self) -> None:
        self.started = False
        self.completed: list = []
        self.run_result = None
        self.stopped_at: int | None = None

    async def on_run_start(self, suite) -> None:
        self.started = True

    async def on_test_complete(self, result) -> None:
        self.completed.append(result)

    async def on_run_complete(self, run_result) -> None:
        self.run_result = run_result

    async def on_run_stopped_early(self, failure_count: int) -> None:
        self.stopped_at = failure_count


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def assertion_context():
    """Activate a test context so matchers can be evaluated directly."""
    ctx = TestContext(test_item_name="direct")
    with context_scope(ctx):
        yield ctx


@pytest.fixture(autouse=True)
def clean_default_suite():
    reset_default_suite()
    yield
    reset_default_suite()


@pytest.fixture
def run_suite():
    """Run a suite with a silent reporter and return the RunResult."""

    def _run(suite, **kwargs):
        kwargs.setdefault("reporters", [NullReporter()])
        return asyncio.run(Runner(**kwargs).run(suite))

    return _run
