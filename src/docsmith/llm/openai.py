"""OpenAI provider using the Chat Completions API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import logfire

from docsmith.core.errors import MissingCredentialError
from docsmith.llm.provider import GenerateOptions, HTTPProvider

if TYPE_CHECKING:
    from docsmith.core.config import Settings


class OpenAIProvider(HTTPProvider):
    """OpenAI (or any compatible endpoint via OPENAI_BASE_URL)."""

    name = "openai"
    remediation_hint = "Make sure OPENAI_API_KEY is set"
    api_key_env = "OPENAI_API_KEY"

    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_TEMPERATURE = 0.1
    DEFAULT_MAX_TOKENS = 8192

    def __init__(
        self,
        api_key: str | None = None,
        default_model: str | None = None,
        base_url: str | None = None,
        timeout: float = 300.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url or self.DEFAULT_BASE_URL,
            default_model=default_model or self.DEFAULT_MODEL,
            timeout=timeout,
            transport=transport,
        )
        self.api_key = api_key or ""

    @classmethod
    def from_settings(cls, settings: Settings, model: str | None = None) -> OpenAIProvider:
        return cls(
            api_key=settings.openai_api_key,
            default_model=model,
            base_url=settings.openai_base_url,
            timeout=settings.http_timeout,
        )

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def health_check(self) -> bool:
        if not self.api_key:
            return False
        try:
            await self._get_json("/models", headers=self._headers())
        except Exception as e:
            logfire.warn("Provider health check failed", provider=self.name, error=str(e))
            return False
        return True

    async def list_models(self) -> list[str]:
        if not self.api_key:
            return []
        try:
            data = await self._get_json("/models", headers=self._headers())
            return [m["id"] for m in data["data"] if m["id"].startswith("gpt")]
        except Exception:
            return []

    async def generate(self, prompt: str, options: GenerateOptions | None = None) -> str:
        if not self.api_key:
            raise MissingCredentialError(self.name, self.api_key_env)

        model = self.resolve_model(options)
        opts = options or GenerateOptions()

        logfire.info("Calling OpenAI API", model=model, prompt_chars=len(prompt))

        data = await self._post_json(
            "/chat/completions",
            {
                "model": model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": (
                    opts.temperature if opts.temperature is not None else self.DEFAULT_TEMPERATURE
                ),
                "max_tokens": opts.max_output_tokens or self.DEFAULT_MAX_TOKENS,
            },
            headers=self._headers(),
            label="OpenAI",
        )

        choices = data.get("choices") or []
        if not choices:
            return ""
        return choices[0].get("message", {}).get("content") or ""
