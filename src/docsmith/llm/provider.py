"""LLM provider abstraction for documentation generation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import httpx
import logfire

from docsmith.core.errors import GenerationError

if TYPE_CHECKING:
    from typing import Self

    from docsmith.core.config import Settings


@dataclass(frozen=True)
class GenerateOptions:
    """Per-request generation options.

    Unset fields fall back to the provider defaults.
    """

    temperature: float | None = None
    max_output_tokens: int | None = None
    model: str | None = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Providers hold configuration only. Every call is independent, so an
    instance can be reused for a whole run.
    """

    name: ClassVar[str]
    remediation_hint: ClassVar[str] = ""
    default_model: str

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Settings, model: str | None = None) -> Self:
        """Build the provider from application settings."""

    @abstractmethod
    async def generate(self, prompt: str, options: GenerateOptions | None = None) -> str:
        """Generate text for a prompt.

        Raises:
            MissingCredentialError: If the provider needs a key that is not set
            GenerationError: If the backend rejects the request
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Return whether the backend is usable. Never raises."""

    @abstractmethod
    async def list_models(self) -> list[str]:
        """Return available model identifiers, or an empty list on failure."""

    def resolve_model(self, options: GenerateOptions | None) -> str:
        """Pick the request model, preferring the per-call override."""
        if options is not None and options.model:
            return options.model
        return self.default_model


class HTTPProvider(LLMProvider):
    """Base for providers that talk JSON over HTTP with httpx."""

    def __init__(
        self,
        base_url: str,
        default_model: str,
        timeout: float = 300.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            base_url: Root URL of the backend API
            default_model: Model used when a request does not override it
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.default_model = default_model
        self.timeout = timeout
        self._transport = transport

    def _client(self, headers: dict[str, str] | None = None) -> httpx.AsyncClient:
        """Create a short-lived client bound to the backend."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _get_json(self, path: str, headers: dict[str, str] | None = None) -> Any:
        """GET a JSON document, raising httpx errors on failure."""
        async with self._client(headers) as client:
            response = await client.get(path)
            response.raise_for_status()
            return response.json()

    async def _post_json(
        self,
        path: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        label: str | None = None,
    ) -> Any:
        """POST a JSON payload and return the decoded response.

        Transport failures and non-success statuses become GenerationError.
        """
        label = label or self.name
        try:
            async with self._client(headers) as client:
                response = await client.post(path, json=payload)
        except httpx.HTTPError as e:
            logfire.error(f"{label} request failed", provider=self.name, error=str(e))
            raise GenerationError(
                f"{label} API request failed: {e}", provider=self.name
            ) from e

        if response.is_error:
            raise GenerationError(
                f"{label} API error: {response.status_code} - {response.text}",
                provider=self.name,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise GenerationError(
                f"{label} API returned invalid JSON",
                provider=self.name,
                status_code=response.status_code,
            ) from e
