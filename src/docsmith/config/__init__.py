"""Configuration module for docsmith."""

from docsmith.config.project_config import (
    ProjectConfig,
    load_project_config,
    parse_project_config,
)

__all__ = [
    "ProjectConfig",
    "load_project_config",
    "parse_project_config",
]
