"""Tracking of files that failed generation, for later retry.

The tracking file holds the failures of the most recent run only. Its
absence means the last run had no failures.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import logfire


def _utc_now() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class FailedFileRecord:
    """A source document whose generation failed."""

    relative_path: str
    error: str
    timestamp: str = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, str]:
        """Serialize using the side file's key names."""
        return {
            "relativePath": self.relative_path,
            "error": self.error,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FailedFileRecord:
        """Deserialize one side file entry.

        Raises:
            KeyError: If relativePath is missing
        """
        return cls(
            relative_path=str(data["relativePath"]),
            error=str(data.get("error", "")),
            timestamp=str(data.get("timestamp", "")),
        )


def load_failed_files(path: Path) -> list[FailedFileRecord]:
    """Load the failures recorded by the previous run.

    A missing or unreadable file means there is nothing to retry.
    """
    path = Path(path)
    if not path.exists():
        return []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("Failed files list must be a JSON array")
        return [FailedFileRecord.from_dict(entry) for entry in data]
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logfire.warn("Ignoring unreadable failed files list", path=str(path), error=str(e))
        return []


def save_failed_files(path: Path, records: list[FailedFileRecord]) -> None:
    """Replace the tracking file with ``records``.

    An empty list removes the file.
    """
    path = Path(path)
    if not records:
        path.unlink(missing_ok=True)
        return

    payload = [record.to_dict() for record in records]
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def clear_failed_files(path: Path) -> bool:
    """Delete the tracking file.

    Returns:
        True if a file was removed
    """
    path = Path(path)
    if path.exists():
        path.unlink()
        return True
    return False
