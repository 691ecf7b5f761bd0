"""Provider registry mapping fixed names to provider classes."""

from __future__ import annotations

from docsmith.core.config import Settings, get_settings
from docsmith.core.errors import UnknownProviderError
from docsmith.llm.claude import ClaudeProvider
from docsmith.llm.gemini import GeminiProvider
from docsmith.llm.ollama import OllamaProvider
from docsmith.llm.openai import OpenAIProvider
from docsmith.llm.provider import LLMProvider

PROVIDERS: dict[str, type[LLMProvider]] = {
    OllamaProvider.name: OllamaProvider,
    GeminiProvider.name: GeminiProvider,
    ClaudeProvider.name: ClaudeProvider,
    OpenAIProvider.name: OpenAIProvider,
}


def available_providers() -> list[str]:
    """Names accepted by get_provider, in display order."""
    return list(PROVIDERS)


def get_provider(
    provider_name: str | None = None,
    model: str | None = None,
    settings: Settings | None = None,
) -> LLMProvider:
    """Get an LLM provider instance.

    Args:
        provider_name: Registered provider name; defaults to the configured one
        model: Optional default model override. LLM_MODEL only applies
            when the name is the configured provider
        settings: Settings to read credentials and endpoints from

    Raises:
        UnknownProviderError: If the name is not registered
    """
    settings = settings or get_settings()
    name = provider_name or settings.llm_provider

    provider_cls = PROVIDERS.get(name)
    if provider_cls is None:
        raise UnknownProviderError(name, available_providers())

    if model is None and name == settings.llm_provider:
        model = settings.llm_model
    return provider_cls.from_settings(settings, model=model)
