"""Shared types for the expecto testing framework."""

from enum import Enum


class HookKind(Enum):
    """Group lifecycle phase a hook is bound to."""

    BEFORE_ALL = "before_all"
    AFTER_ALL = "after_all"
    BEFORE_EACH = "before_each"
    AFTER_EACH = "after_each"


class Completion(Enum):
    """How a test body or hook signals that it finished."""

    SYNC = "sync"  # Returns normally
    CALLBACK = "callback"  # Calls the injected ``done`` signal
    DEFERRED = "deferred"  # Returns an awaitable that settles later


class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()
