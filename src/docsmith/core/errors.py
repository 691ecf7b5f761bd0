"""Error types raised while building documentation."""

from __future__ import annotations


class DocsmithError(Exception):
    """Base class for all docsmith errors."""


class UnknownProviderError(DocsmithError):
    """Raised when a provider name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(f"Unknown provider: {name}. Available: {', '.join(available)}")
        self.name = name
        self.available = available


class ProviderUnavailableError(DocsmithError):
    """Raised when the selected provider fails its health check."""

    def __init__(self, name: str, hint: str | None = None) -> None:
        super().__init__(f'Provider "{name}" is not available.')
        self.name = name
        self.hint = hint


class GenerationError(DocsmithError):
    """The backend rejected a generation request or could not be reached."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class MissingCredentialError(GenerationError):
    """The provider needs an API key that is not configured."""

    def __init__(self, provider: str, env_var: str) -> None:
        super().__init__(f"{env_var} is not set", provider=provider)
        self.env_var = env_var


class SourceFileNotFoundError(DocsmithError, FileNotFoundError):
    """An explicitly requested source document does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class UnsafePathError(DocsmithError, ValueError):
    """A requested path resolves outside the directory it must stay in."""

    def __init__(self, path: str, base: str) -> None:
        super().__init__(f"Path escapes {base}: {path}")
        self.path = path
        self.base = base
