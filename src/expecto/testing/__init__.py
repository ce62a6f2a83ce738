"""Test registration and execution.

Provides jest-style ``describe``/``test`` registration with lifecycle hooks
and a sequential asyncio runner.
"""

from .loader import load_suite
from .runner import (
    DEFAULT_TIMEOUT,
    Done,
    FailureKind,
    HookFailure,
    Runner,
    RunResult,
    TestResult,
    TestStatus,
    run,
)
from .selection import NamePattern
from .suite import (
    Group,
    Hook,
    Suite,
    TestCase,
    after_all,
    after_each,
    before_all,
    before_each,
    describe,
    detect_completion,
    get_suite,
    reset_default_suite,
    suite_scope,
    test,
)
from .tags import TagData


__all__ = [
    "DEFAULT_TIMEOUT",
    "Done",
    "FailureKind",
    "Group",
    "Hook",
    "HookFailure",
    "NamePattern",
    "RunResult",
    "Runner",
    "Suite",
    "TagData",
    "TestCase",
    "TestResult",
    "TestStatus",
    "after_all",
    "after_each",
    "before_all",
    "before_each",
    "describe",
    "detect_completion",
    "get_suite",
    "load_suite",
    "reset_default_suite",
    "run",
    "suite_scope",
    "test",
]
