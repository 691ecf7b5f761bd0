"""Anthropic Claude provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import anthropic
import httpx
import logfire

from docsmith.core.errors import GenerationError, MissingCredentialError
from docsmith.llm.provider import GenerateOptions, LLMProvider

if TYPE_CHECKING:
    from docsmith.core.config import Settings


class ClaudeProvider(LLMProvider):
    """Anthropic Claude provider.

    Uses the official SDK for the Messages API. Claude has no cheap health
    endpoint, so the health check only verifies that a key is configured.
    """

    name = "claude"
    remediation_hint = "Make sure ANTHROPIC_API_KEY is set"
    api_key_env = "ANTHROPIC_API_KEY"

    DEFAULT_MODEL = "claude-3-haiku-20240307"
    DEFAULT_MAX_TOKENS = 8192
    KNOWN_MODELS = [
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
        "claude-3-5-sonnet-20241022",
    ]

    def __init__(
        self,
        api_key: str | None = None,
        default_model: str | None = None,
        base_url: str | None = None,
        timeout: float = 300.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or ""
        self.default_model = default_model or self.DEFAULT_MODEL
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, model: str | None = None) -> ClaudeProvider:
        return cls(
            api_key=settings.anthropic_api_key,
            default_model=model,
            base_url=settings.anthropic_base_url,
            timeout=settings.http_timeout,
        )

    def _client(self) -> anthropic.AsyncAnthropic:
        kwargs: dict[str, Any] = {"api_key": self.api_key, "timeout": self.timeout}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        if self._transport is not None:
            kwargs["http_client"] = httpx.AsyncClient(transport=self._transport)
        return anthropic.AsyncAnthropic(**kwargs)

    async def health_check(self) -> bool:
        return bool(self.api_key)

    async def list_models(self) -> list[str]:
        return list(self.KNOWN_MODELS)

    async def generate(self, prompt: str, options: GenerateOptions | None = None) -> str:
        if not self.api_key:
            raise MissingCredentialError(self.name, self.api_key_env)

        model = self.resolve_model(options)
        opts = options or GenerateOptions()

        kwargs: dict[str, Any] = {
            "model": model,
            "max_tokens": opts.max_output_tokens or self.DEFAULT_MAX_TOKENS,
            "messages": [{"role": "user", "content": prompt}],
        }
        if opts.temperature is not None:
            kwargs["temperature"] = opts.temperature

        logfire.info(
            "Calling Claude API",
            model=model,
            max_tokens=kwargs["max_tokens"],
        )

        client = self._client()
        try:
            response = await client.messages.create(**kwargs)
        except anthropic.APIStatusError as e:
            raise GenerationError(
                f"Claude API error: {e.status_code} - {e.message}",
                provider=self.name,
                status_code=e.status_code,
            ) from e
        except anthropic.APIError as e:
            raise GenerationError(f"Claude API request failed: {e}", provider=self.name) from e
        finally:
            await client.close()

        # Extract text content
        content = ""
        for block in response.content:
            if block.type == "text":
                content += block.text

        logfire.info(
            "Claude API response",
            model=response.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            stop_reason=response.stop_reason,
        )

        return content
