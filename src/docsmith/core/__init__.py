"""Core docsmith functionality."""

from docsmith.core.config import Settings, get_settings
from docsmith.core.errors import (
    DocsmithError,
    GenerationError,
    MissingCredentialError,
    ProviderUnavailableError,
    SourceFileNotFoundError,
    UnknownProviderError,
    UnsafePathError,
)

# Lazy imports to avoid circular import with llm and generator


def __getattr__(name: str):
    """Lazy import to avoid circular imports."""
    if name in ("DocumentationService", "GenerationResult", "RunMode", "RunOptions"):
        from docsmith.core import service

        return getattr(service, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DocsmithError",
    "DocumentationService",
    "GenerationError",
    "GenerationResult",
    "MissingCredentialError",
    "ProviderUnavailableError",
    "RunMode",
    "RunOptions",
    "Settings",
    "SourceFileNotFoundError",
    "UnknownProviderError",
    "UnsafePathError",
    "get_settings",
]
