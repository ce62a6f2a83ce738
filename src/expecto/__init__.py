"""expecto - jest-style assertions and test runner for Python."""

from .assertions import AssertionResult, Expectation, expect
from .errors import (
    AssertionFailure,
    ConfigurationError,
    ExpectoError,
    MatcherUsageError,
    RejectedValue,
    TestTimeout,
)
from .testing import (
    Done,
    FailureKind,
    Runner,
    RunResult,
    Suite,
    TestResult,
    TestStatus,
    after_all,
    after_each,
    before_all,
    before_each,
    describe,
    load_suite,
    run,
    suite_scope,
    test,
)
from .types import UNDEFINED

__version__ = "0.1.0"


__all__ = [
    # Registration
    "Suite",
    "suite_scope",
    "describe",
    "test",
    "before_all",
    "after_all",
    "before_each",
    "after_each",
    "load_suite",
    # Assertions
    "expect",
    "Expectation",
    "AssertionResult",
    "UNDEFINED",
    # Running
    "Runner",
    "RunResult",
    "TestResult",
    "TestStatus",
    "FailureKind",
    "Done",
    "run",
    # Errors
    "ExpectoError",
    "AssertionFailure",
    "ConfigurationError",
    "MatcherUsageError",
    "RejectedValue",
    "TestTimeout",
]
