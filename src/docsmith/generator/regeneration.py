"""Staleness check deciding which documents need regeneration."""

from pathlib import Path


def needs_regeneration(source_path: Path, target_path: Path, force: bool = False) -> bool:
    """Check whether a target document must be regenerated from its source.

    Only modification times are compared. A source touched without content
    changes is still regenerated.

    Args:
        source_path: Canonical source document
        target_path: Generated document
        force: Regenerate regardless of timestamps

    Returns:
        True if forced, the target is missing, or the source is newer
    """
    if force:
        return True

    target_path = Path(target_path)
    if not target_path.exists():
        return True

    return Path(source_path).stat().st_mtime > target_path.stat().st_mtime
