"""Assertion library: ``expect`` and its matchers."""

from .base import AssertionResult, record_assertion
from .equality import deep_equal, same_value, structural_diff
from .expect import Expectation, ExpectFactory, Settle, expect

__all__ = [
    "AssertionResult",
    "Expectation",
    "ExpectFactory",
    "Settle",
    "deep_equal",
    "expect",
    "record_assertion",
    "same_value",
    "structural_diff",
]
