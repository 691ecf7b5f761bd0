"""Ollama provider for local model generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import logfire

from docsmith.llm.provider import GenerateOptions, HTTPProvider

if TYPE_CHECKING:
    from docsmith.core.config import Settings


class OllamaProvider(HTTPProvider):
    """Local Ollama server.

    Needs no credentials; the health check simply asks the server for its
    installed models.
    """

    name = "ollama"
    remediation_hint = "Make sure Ollama is running: ollama serve"

    DEFAULT_MODEL = "llama3.1"
    DEFAULT_BASE_URL = "http://localhost:11434"

    def __init__(
        self,
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

    @classmethod
    def from_settings(cls, settings: Settings, model: str | None = None) -> OllamaProvider:
        return cls(
            default_model=model,
            base_url=settings.ollama_base_url,
            timeout=settings.http_timeout,
        )

    async def health_check(self) -> bool:
        try:
            await self._get_json("/api/tags")
        except Exception as e:
            logfire.warn("Provider health check failed", provider=self.name, error=str(e))
            return False
        return True

    async def list_models(self) -> list[str]:
        try:
            data = await self._get_json("/api/tags")
            return [m["name"] for m in data.get("models", [])]
        except Exception:
            return []

    async def generate(self, prompt: str, options: GenerateOptions | None = None) -> str:
        model = self.resolve_model(options)
        opts = options or GenerateOptions()

        model_options: dict[str, float | int] = {}
        if opts.temperature is not None:
            model_options["temperature"] = opts.temperature
        if opts.max_output_tokens is not None:
            model_options["num_predict"] = opts.max_output_tokens

        logfire.info("Calling Ollama API", model=model, prompt_chars=len(prompt))

        data = await self._post_json(
            "/api/generate",
            {
                "model": model,
                "prompt": prompt,
                "stream": False,
                "options": model_options,
            },
            label="Ollama",
        )
        return data.get("response", "")
