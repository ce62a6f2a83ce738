"""Equality rules used by the matchers."""

from __future__ import annotations

import dataclasses
import difflib
import math
from collections.abc import Mapping, Sequence, Set
from numbers import Real
from typing import Any

from rich.pretty import pretty_repr

_SCALARS = (str, bytes, bool, complex, type(None))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def same_value(actual: Any, expected: Any) -> bool:
    """Identity for objects, value equality for immutable scalars.

    NaN is the same value as NaN, ``0.0`` and ``-0.0`` differ, and a bool is
    never the same value as a number.
    """
    if actual is expected:
        return True
    if _is_number(actual) and _is_number(expected):
        if _is_nan(actual) and _is_nan(expected):
            return True
        if actual == 0 and expected == 0 and isinstance(actual, float) and isinstance(expected, float):
            return math.copysign(1.0, actual) == math.copysign(1.0, expected)
        return actual == expected
    if isinstance(actual, _SCALARS) and type(actual) is type(expected):
        return actual == expected
    return False


def _attributes(value: Any) -> dict[str, Any] | None:
    """Attribute mapping for plain objects and dataclasses, None otherwise.

    Functions and other callables keep identity semantics.
    """
    if isinstance(value, type) or callable(value):
        return None
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if type(value).__eq__ is not object.__eq__:
        return None

    slot_names = _slot_names(type(value))
    if not hasattr(value, "__dict__") and not slot_names:
        return None
    attrs = dict(vars(value)) if hasattr(value, "__dict__") else {}
    for name in slot_names:
        if hasattr(value, name):
            attrs[name] = getattr(value, name)
    return attrs


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(n for n in slots if n not in ("__dict__", "__weakref__") and n not in names)
    return names


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def deep_equal(actual: Any, expected: Any) -> bool:
    """Recursively compare two values field by field and element by element."""
    return _deep_equal(actual, expected, set())


def _deep_equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if _is_nan(a) and _is_nan(b):
        return True

    key = (id(a), id(b))
    if key in seen:
        return True

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if set(a.keys()) != set(b.keys()):
            return False
        seen.add(key)
        return all(_deep_equal(a[k], b[k], seen) for k in a)

    if _is_sequence(a) and _is_sequence(b):
        if len(a) != len(b):
            return False
        seen.add(key)
        return all(_deep_equal(x, y, seen) for x, y in zip(a, b))

    if isinstance(a, Set) and isinstance(b, Set):
        return a == b

    attrs_a = _attributes(a)
    attrs_b = _attributes(b)
    if attrs_a is not None and attrs_b is not None:
        seen.add(key)
        return _deep_equal(attrs_a, attrs_b, seen)

    if isinstance(a, bool) != isinstance(b, bool):
        return False

    try:
        return bool(a == b)
    except Exception:
        return False


def structural_diff(actual: Any, expected: Any) -> str:
    """Line diff between the pretty-printed expected and received values."""
    expected_lines = pretty_repr(expected).splitlines()
    actual_lines = pretty_repr(actual).splitlines()
    diff = difflib.unified_diff(
        expected_lines,
        actual_lines,
        fromfile="Expected",
        tofile="Received",
        lineterm="",
    )
    return "\n".join(diff)
