"""Template loader for Jinja2 prompt templates."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

GENERATE_TEMPLATE = "generate.md.j2"


def get_template_dirs(custom_dir: Path | None = None) -> list[Path]:
    """Get the list of template directories.

    A custom directory, when given, is searched before the bundled prompts.

    Returns:
        List of paths to template directories
    """
    dirs = [Path(__file__).parent.parent / "generator" / "prompts"]
    if custom_dir is not None:
        dirs.insert(0, Path(custom_dir))
    return dirs


class TemplateLoader:
    """Loads and renders Jinja2 templates for prompts.

    Bundled templates live in src/docsmith/generator/prompts/.
    """

    def __init__(self, template_dirs: list[Path] | None = None) -> None:
        """Initialize the template loader.

        Args:
            template_dirs: Optional list of directories to search for templates.
                          Defaults to the bundled prompt directory.
        """
        if template_dirs is None:
            template_dirs = get_template_dirs()

        self._env = Environment(
            loader=FileSystemLoader([str(d) for d in template_dirs]),
            autoescape=False,  # Prompts are plain text, not HTML
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """Render a template with the given context.

        Raises:
            jinja2.TemplateNotFound: If template doesn't exist
        """
        template = self._env.get_template(template_name)
        return template.render(**context)


@lru_cache(maxsize=1)
def get_template_loader() -> TemplateLoader:
    """Get the loader for the bundled templates.

    Returns:
        Singleton TemplateLoader instance
    """
    return TemplateLoader()


def build_prompt(
    content: str,
    guidelines: str = "",
    loader: TemplateLoader | None = None,
) -> str:
    """Substitute source content into the generation prompt."""
    loader = loader or get_template_loader()
    return loader.render(GENERATE_TEMPLATE, content=content, guidelines=guidelines)
