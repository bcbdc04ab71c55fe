"""Frame attribute maps and the pure helpers that filter and merge them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union

AttributeValue = Union[int, float, bool, str, None]
AttributeMap = dict[str, AttributeValue]
SnapshotSequence = list[AttributeMap]

DEFAULT_TRACKED_KEYS: tuple[str, ...] = (
    "left",
    "top",
    "width",
    "height",
    "maximized",
    "fullscreen",
)


def filter_attributes(
    attributes: Mapping[str, AttributeValue], tracked: Iterable[str]
) -> AttributeMap:
    """Return only the tracked entries, in the order they appear in `attributes`."""
    keep = set(tracked)
    return {key: value for key, value in attributes.items() if key in keep}


def merge_attributes(
    base: Mapping[str, AttributeValue], overrides: Mapping[str, AttributeValue]
) -> AttributeMap:
    """Merge `overrides` into a copy of `base`.

    Keys already in `base` keep their position and take the override value.
    New keys are appended in override order. Keys only in `base` are kept.
    """
    merged: AttributeMap = dict(base)
    for key, value in overrides.items():
        merged[key] = value
    return merged


def attributes_equal(left: Mapping[str, AttributeValue], right: Mapping[str, AttributeValue]) -> bool:
    """Compare two attribute maps, treating `True` and `1` as different values."""
    if left.keys() != right.keys():
        return False
    for key, value in left.items():
        other = right[key]
        if type(value) is not type(other) or value != other:
            return False
    return True


def filter_sequence(sequence: Iterable[Mapping[str, AttributeValue]], tracked: Iterable[str]) -> SnapshotSequence:
    keep = tuple(tracked)
    return [filter_attributes(item, keep) for item in sequence]
