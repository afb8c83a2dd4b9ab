"""
Progress persistence - unlocked levels, Classic checkpoints and high scores.

The record is a single JSON document, overwritten wholesale on every save.
Losing progress is never fatal: read failures fall back to a fresh record and
write failures are logged and swallowed.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional, Union


DEFAULT_PROGRESS_FILE = "progress.json"


@dataclass
class LevelData:
    """Checkpoint saved when a Classic level is completed."""
    snake_length: int
    score: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"snake_length": self.snake_length, "score": self.score}


@dataclass
class ProgressRecord:
    """Cross-session progress."""
    max_unlocked_level: int = 1
    level_data: Dict[int, LevelData] = field(default_factory=dict)
    hardcore_high_score: int = 0
    survival_high_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary (level keys become strings)."""
        return {
            "max_unlocked_level": self.max_unlocked_level,
            "level_data": {
                str(level): data.to_dict()
                for level, data in sorted(self.level_data.items())
            },
            "hardcore_high_score": self.hardcore_high_score,
            "survival_high_score": self.survival_high_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgressRecord":
        """
        Create a record from a dictionary.

        Raises:
            ValueError, TypeError, KeyError: If the data is malformed
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        level_data = {
            int(level): LevelData(
                snake_length=int(entry["snake_length"]),
                score=int(entry["score"]),
            )
            for level, entry in data.get("level_data", {}).items()
        }
        return cls(
            max_unlocked_level=max(1, int(data.get("max_unlocked_level", 1))),
            level_data=level_data,
            hardcore_high_score=int(data.get("hardcore_high_score", 0)),
            survival_high_score=int(data.get("survival_high_score", 0)),
        )


class ProgressStore:
    """
    File-backed progress store.

    The path is relative to the process working directory unless absolute.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_PROGRESS_FILE):
        """
        Initialize the store.

        Args:
            path: Location of the JSON progress document
        """
        self.path = Path(path)
        self._record = ProgressRecord()

    @property
    def record(self) -> ProgressRecord:
        """The most recently loaded or saved record."""
        return self._record

    def load(self) -> ProgressRecord:
        """
        Load the persisted record.

        Returns:
            The stored record, or a fresh one if missing or unreadable
        """
        self._record = self._read()
        return self._record

    def _read(self) -> ProgressRecord:
        if not self.path.exists():
            return ProgressRecord()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return ProgressRecord.from_dict(data)
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            print(f"[Progress] Failed to load {self.path}: {e}; starting fresh")
            return ProgressRecord()

    def save(self, record: Optional[ProgressRecord] = None) -> bool:
        """
        Overwrite the persisted record.

        Args:
            record: Record to save (defaults to the current record)

        Returns:
            True if the record was written, False if the write failed
        """
        if record is not None:
            self._record = record
        return self._write(self._record)

    def _write(self, record: ProgressRecord) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(record.to_dict(), f, indent=2)
            return True
        except (OSError, TypeError, ValueError) as e:
            print(f"[Progress] Failed to save {self.path}: {e}")
            return False

    def update_max_unlocked_level(self, level: int) -> None:
        """
        Raise the unlocked level and save immediately.

        Args:
            level: Newly reached level; ignored unless above the stored one
        """
        if level > self._record.max_unlocked_level:
            self._record.max_unlocked_level = level
            self.save()


class MemoryProgressStore(ProgressStore):
    """Progress store that never touches disk."""

    def __init__(self, record: Optional[ProgressRecord] = None):
        super().__init__(path=DEFAULT_PROGRESS_FILE)
        self._stored = ProgressRecord.from_dict((record or ProgressRecord()).to_dict())
        self.save_count = 0

    def _read(self) -> ProgressRecord:
        # Hand out a copy so unsaved edits do not leak into the stored record
        return ProgressRecord.from_dict(self._stored.to_dict())

    def _write(self, record: ProgressRecord) -> bool:
        self._stored = ProgressRecord.from_dict(record.to_dict())
        self.save_count += 1
        return True
