"""Skip/only metadata for tests and groups."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TagData:
    """Selection metadata attached to a test or group."""

    skip_reason: str | None = None
    only: bool = False


def skip_tag(reason: str | None = None) -> TagData:
    return TagData(skip_reason=reason or "skipped via tag")


def only_tag() -> TagData:
    return TagData(only=True)


def merge_tag_data(*datas: TagData | None) -> TagData:
    """Merge tag metadata, later entries overriding earlier ones."""
    merged = TagData()
    for data in datas:
        if not data:
            continue
        if data.skip_reason is not None:
            merged.skip_reason = data.skip_reason
        merged.only = merged.only or data.only
    return merged


__all__ = ["TagData", "merge_tag_data", "only_tag", "skip_tag"]
