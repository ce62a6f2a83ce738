"""Configuration loaded from ``[tool.expecto]`` in pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from expecto.errors import ConfigurationError

PYPROJECT = "pyproject.toml"


class ExpectoConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(default=5.0, gt=0)
    maxfail: int | None = Field(default=None, ge=1)
    name_pattern: str | None = None
    verbosity: int = 0
    addopts: list[str] = []

    @field_validator("addopts", mode="before")
    @classmethod
    def split_addopts(cls, v: Any) -> Any:
        """Accept ``addopts`` as a single string as well as a list."""
        if isinstance(v, str):
            return v.split()
        return v


DEFAULT_CONFIG = ExpectoConfig()


def find_project_root(start: Path | None = None) -> Path | None:
    """Return the nearest directory at or above ``start`` holding a pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        if (directory / PYPROJECT).is_file():
            return directory
    return None


def load_config(start: Path | None = None) -> ExpectoConfig:
    """Load ``[tool.expecto]`` from the nearest pyproject.toml, or the defaults."""
    root = find_project_root(start)
    if root is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    path = root / PYPROJECT
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid {path}: {exc}"
        raise ConfigurationError(msg) from exc

    section = data.get("tool", {}).get("expecto", {})
    try:
        return ExpectoConfig.model_validate(section)
    except ValidationError as exc:
        msg = f"Invalid [tool.expecto] in {path}:\n{exc}"
        raise ConfigurationError(msg) from exc


__all__ = ["DEFAULT_CONFIG", "ExpectoConfig", "find_project_root", "load_config"]
