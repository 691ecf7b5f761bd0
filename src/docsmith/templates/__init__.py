"""Template loading and rendering for prompts."""

from docsmith.templates.loader import (
    GENERATE_TEMPLATE,
    TemplateLoader,
    build_prompt,
    get_template_dirs,
    get_template_loader,
)

__all__ = [
    "GENERATE_TEMPLATE",
    "TemplateLoader",
    "build_prompt",
    "get_template_dirs",
    "get_template_loader",
]
