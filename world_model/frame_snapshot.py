"""Validation models for decoded frame snapshot documents."""

from __future__ import annotations

from typing import Any, Union

from pydantic import RootModel, StrictBool, StrictFloat, StrictInt, StrictStr

from world_model.frame_attributes import SnapshotSequence

# Strict scalars keep JSON `true` a bool and `1` an int.
ScalarValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]


class FrameSnapshot(RootModel[dict[str, ScalarValue]]):
    """Attributes of one frame at capture time."""


class SnapshotDocument(RootModel[list[FrameSnapshot]]):
    """Top-level persisted document: one snapshot per frame, primary first."""

    @classmethod
    def from_sequence(cls, sequence: SnapshotSequence) -> SnapshotDocument:
        return cls.model_validate([dict(item) for item in sequence])

    def to_sequence(self) -> SnapshotSequence:
        return [dict(frame.root) for frame in self.root]

    def to_jsonable(self) -> list[dict[str, Any]]:
        return self.model_dump()
