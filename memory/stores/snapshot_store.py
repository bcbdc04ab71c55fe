"""JSON file store for frame snapshot sequences."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from world_model.frame_attributes import SnapshotSequence, filter_sequence
from world_model.frame_snapshot import SnapshotDocument


class SnapshotLoadError(Exception):
    """No usable snapshot could be read."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class SnapshotNotFoundError(SnapshotLoadError):
    """The snapshot file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "Snapshot file not found")


class SnapshotParseError(SnapshotLoadError):
    """The snapshot file exists but does not hold a valid snapshot sequence."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"Invalid snapshot file ({reason})")
        self.reason = reason


class SnapshotStore:
    """Persists one snapshot sequence per file, replaced wholesale on save."""

    def __init__(self, path: Path, tracked_keys: Iterable[str]) -> None:
        self.path = path
        self.tracked_keys = tuple(tracked_keys)
        self.logger = logging.getLogger("fr.snapshot_store")

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, sequence: SnapshotSequence) -> Path:
        """Write the filtered sequence atomically, replacing previous content.

        Raises OSError when the file cannot be written and ValueError for
        values JSON cannot hold (NaN, infinity).
        """
        document = SnapshotDocument.from_sequence(filter_sequence(sequence, self.tracked_keys))
        payload = json.dumps(document.to_jsonable(), indent=2, ensure_ascii=True, allow_nan=False) + "\n"

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self.logger.debug("Saved %d frame snapshot(s) to %s", len(document.root), self.path)
        return self.path

    def load(self) -> SnapshotSequence:
        """Read the sequence and filter it with the current tracked keys.

        Raises SnapshotNotFoundError or SnapshotParseError.
        """
        if not self.path.exists():
            raise SnapshotNotFoundError(self.path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotParseError(self.path, "not UTF-8 text") from e
        except OSError as e:
            raise SnapshotParseError(self.path, f"unreadable: {e.strerror or e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotParseError(self.path, f"malformed JSON at line {e.lineno}") from e
        try:
            document = SnapshotDocument.model_validate(data)
        except ValidationError as e:
            raise SnapshotParseError(self.path, f"{e.error_count()} schema error(s)") from e

        return filter_sequence(document.to_sequence(), self.tracked_keys)

    def clear(self) -> bool:
        """Delete the snapshot file; returns False when there was none."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        self.logger.info("Removed snapshot file %s", self.path)
        return True
