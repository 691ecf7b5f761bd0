"""Shared fixtures for the docsmith test suite.

All tests run without network access; providers are mocked or served by
httpx.MockTransport.
"""

from pathlib import Path
from unittest.mock import AsyncMock

import logfire
import pytest
from rich.console import Console

from docsmith.core.config import Settings
from docsmith.llm import LLMProvider


@pytest.fixture(scope="session", autouse=True)
def _configure_logfire() -> None:
    """Keep log events local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Empty canonical docs directory."""
    path = tmp_path / "docs" / "llm"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Output directory (not created up front)."""
    return tmp_path / "docs" / "en"


@pytest.fixture
def settings(tmp_path: Path, source_dir: Path, target_dir: Path) -> Settings:
    """Settings pointing at the temporary layout, with no credentials."""
    return Settings(
        _env_file=None,
        source_dir=source_dir,
        target_dir=target_dir,
        failed_files_path=tmp_path / ".docs-generate-failed.json",
        llm_provider="ollama",
        llm_model=None,
        gemini_api_key=None,
        anthropic_api_key=None,
        openai_api_key=None,
    )


@pytest.fixture
def quiet_console() -> Console:
    """Console that swallows progress output."""
    return Console(quiet=True)


@pytest.fixture
def mock_provider() -> AsyncMock:
    """Healthy provider that returns a fixed document."""
    provider = AsyncMock(spec=LLMProvider)
    provider.name = "mock"
    provider.default_model = "mock-model"
    provider.remediation_hint = "Start the mock backend"
    provider.health_check.return_value = True
    provider.list_models.return_value = ["mock-model"]
    provider.generate.return_value = "# Generated\n\nHuman-readable output.\n"
    return provider
