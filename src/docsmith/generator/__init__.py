"""Documentation generation building blocks."""

from docsmith.generator.failures import (
    FailedFileRecord,
    clear_failed_files,
    load_failed_files,
    save_failed_files,
)
from docsmith.generator.regeneration import needs_regeneration

__all__ = [
    "FailedFileRecord",
    "clear_failed_files",
    "load_failed_files",
    "needs_regeneration",
    "save_failed_files",
]
