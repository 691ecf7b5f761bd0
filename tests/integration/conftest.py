"""Fixtures for integration tests."""

from pathlib import Path

import pytest
from rich.console import Console

from docsmith.core.config import Settings
from docsmith.core.service import DocumentationService
from docsmith.llm import GenerateOptions, LLMProvider


class EchoProvider(LLMProvider):
    """In-process provider that records prompts and returns a fixed document."""

    name = "echo"
    remediation_hint = "Echo is always available"

    def __init__(self, output: str = "# Generated\n", fail: bool = False) -> None:
        self.default_model = "echo-1"
        self.output = output
        self.fail = fail
        self.prompts: list[str] = []

    @classmethod
    def from_settings(cls, settings: Settings, model: str | None = None) -> "EchoProvider":
        return cls()

    async def generate(self, prompt: str, options: GenerateOptions | None = None) -> str:
        self.prompts.append(prompt)
        if self.fail:
            raise RuntimeError("backend unavailable")
        return self.output

    async def health_check(self) -> bool:
        return True

    async def list_models(self) -> list[str]:
        return [self.default_model]


@pytest.fixture
def echo_provider() -> EchoProvider:
    """Healthy provider echoing a fixed document."""
    return EchoProvider()


@pytest.fixture
def failing_provider() -> EchoProvider:
    """Healthy provider whose generate always fails."""
    return EchoProvider(fail=True)


@pytest.fixture
def make_service(settings: Settings):
    """Factory for services over the temporary layout."""
    def factory(provider: LLMProvider) -> DocumentationService:
        return DocumentationService(
            settings=settings, provider=provider, console=Console(quiet=True)
        )

    return factory


@pytest.fixture
def write_source(source_dir: Path):
    """Writer for source documents under the source root."""
    def writer(relative: str, content: str) -> Path:
        path = source_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return writer
