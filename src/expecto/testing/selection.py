"""Selection of tests by name."""

from __future__ import annotations

import re

from expecto.errors import ConfigurationError


class NamePattern:
    """Case-insensitive regular expression searched in a test's full name.

    Full names join group and test names with ``" > "``, so
    ``NamePattern("numbers > .*add")`` selects the ``add`` tests of the
    ``numbers`` group.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        try:
            self.regex = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            msg = f"Invalid test name pattern {pattern!r}: {exc}"
            raise ConfigurationError(msg) from exc

    def match(self, full_name: str) -> bool:
        return self.regex.search(full_name) is not None

    def __repr__(self) -> str:
        return f"NamePattern({self.pattern!r})"


__all__ = ["NamePattern"]
