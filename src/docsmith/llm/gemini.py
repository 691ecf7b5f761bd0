"""Google Gemini provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import logfire

from docsmith.core.errors import MissingCredentialError
from docsmith.llm.provider import GenerateOptions, HTTPProvider

if TYPE_CHECKING:
    from docsmith.core.config import Settings


class GeminiProvider(HTTPProvider):
    """Google Gemini through the Generative Language REST API."""

    name = "gemini"
    remediation_hint = "Make sure GEMINI_API_KEY is set"
    api_key_env = "GEMINI_API_KEY"

    DEFAULT_MODEL = "gemini-2.0-flash"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

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
    def from_settings(cls, settings: Settings, model: str | None = None) -> GeminiProvider:
        return cls(
            api_key=settings.gemini_api_key,
            default_model=model,
            base_url=settings.gemini_base_url,
            timeout=settings.http_timeout,
        )

    def _headers(self) -> dict[str, str]:
        return {"x-goog-api-key": self.api_key}

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
            return [
                m["name"].removeprefix("models/")
                for m in data.get("models", [])
                if "generateContent" in m.get("supportedGenerationMethods", [])
            ]
        except Exception:
            return []

    async def generate(self, prompt: str, options: GenerateOptions | None = None) -> str:
        if not self.api_key:
            raise MissingCredentialError(self.name, self.api_key_env)

        model = self.resolve_model(options)
        opts = options or GenerateOptions()

        generation_config: dict[str, float | int] = {}
        if opts.temperature is not None:
            generation_config["temperature"] = opts.temperature
        if opts.max_output_tokens is not None:
            generation_config["maxOutputTokens"] = opts.max_output_tokens

        logfire.info("Calling Gemini API", model=model, prompt_chars=len(prompt))

        data = await self._post_json(
            f"/models/{model}:generateContent",
            {
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": generation_config,
            },
            headers=self._headers(),
            label="Gemini",
        )

        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts)
