from .context import (
    TestContext,
    TEST_CONTEXT,
    current_test_context,
    test_context_scope,
)

__all__ = [
    "TestContext",
    "TEST_CONTEXT",
    "current_test_context",
    "test_context_scope",
]
