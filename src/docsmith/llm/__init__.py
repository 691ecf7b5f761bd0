"""LLM providers for documentation generation."""

from docsmith.llm.claude import ClaudeProvider
from docsmith.llm.gemini import GeminiProvider
from docsmith.llm.ollama import OllamaProvider
from docsmith.llm.openai import OpenAIProvider
from docsmith.llm.provider import GenerateOptions, HTTPProvider, LLMProvider
from docsmith.llm.registry import PROVIDERS, available_providers, get_provider

__all__ = [
    "PROVIDERS",
    "ClaudeProvider",
    "GeminiProvider",
    "GenerateOptions",
    "HTTPProvider",
    "LLMProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "available_providers",
    "get_provider",
]
