"""Project configuration parsing for .docsmith.yml files."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# Default config file names to look for
CONFIG_FILE_NAMES = [".docsmith.yml", ".docsmith.yaml", "docsmith.yml", "docsmith.yaml"]


class ProjectConfig(BaseModel):
    """Project-level overrides for documentation generation.

    Every field is optional; unset fields fall back to the application
    settings. CLI flags take precedence over both.
    """

    source_dir: Path | None = Field(
        default=None,
        description="Directory holding the canonical source documents",
    )
    target_dir: Path | None = Field(
        default=None,
        description="Directory receiving the generated documentation",
    )
    provider: str | None = Field(
        default=None,
        description="Default LLM provider name",
    )
    model: str | None = Field(
        default=None,
        description="Default model override for the provider",
    )
    guidelines: str = Field(
        default="",
        description="Natural language guidelines appended to the generation prompt",
    )


def parse_project_config(yaml_content: str) -> ProjectConfig:
    """Parse project configuration from YAML content.

    Args:
        yaml_content: Raw YAML string from a .docsmith.yml file.

    Returns:
        Parsed ProjectConfig object with defaults for missing fields.

    Raises:
        ValueError: If YAML is invalid.
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e

    if data is None:
        return ProjectConfig()

    if not isinstance(data, dict):
        raise ValueError("Config must be a YAML mapping")

    return ProjectConfig.model_validate(data)


def load_project_config(root: Path | None = None) -> ProjectConfig:
    """Load project configuration from the first config file found in ``root``.

    Looks for config files in the following order:
    1. .docsmith.yml
    2. .docsmith.yaml
    3. docsmith.yml
    4. docsmith.yaml

    Args:
        root: Directory to search, defaults to the working directory.

    Returns:
        Parsed ProjectConfig, or default config if no file found.
    """
    base = root or Path.cwd()
    for filename in CONFIG_FILE_NAMES:
        config_path = base / filename
        if config_path.is_file():
            return parse_project_config(config_path.read_text(encoding="utf-8"))

    return ProjectConfig()
