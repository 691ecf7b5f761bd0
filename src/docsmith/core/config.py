"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "ci", "production"] = "development"
    log_level: str = "INFO"

    # Layout (relative paths resolve against the working directory)
    source_dir: Path = Path("docs/llm")
    target_dir: Path = Path("docs/en")
    failed_files_path: Path = Path(".docs-generate-failed.json")
    prompt_template_dir: Path | None = Field(
        default=None,
        description="Directory holding a custom generate.md.j2 prompt template.",
    )

    # Generation
    llm_provider: str = "ollama"
    llm_model: str | None = None
    temperature: float = 0.3
    max_output_tokens: int = 16_384
    http_timeout: float = 300.0

    # LLM Providers
    ollama_base_url: str = "http://localhost:11434"
    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    anthropic_api_key: str | None = None
    anthropic_base_url: str | None = None
    openai_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
